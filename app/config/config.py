import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./webstory.db")
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")

    WEBSTORY_CACHE_KEY = os.getenv("WEBSTORY_CACHE_KEY", "webstory")
    WEBSTORY_AUTHOR = "Carprices" # 모든 웹스토리의 작성자는 서비스 소유자로 고정
    DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    ADMIN_API_TOKEN = os.getenv("ADMIN_API_TOKEN") # 설정되지 않으면 상위 미들웨어에 인증을 위임
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))
