import logging
from app.config.config import Config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def setup_logging(level: str = None):
    """애플리케이션 전체의 로깅 설정을 초기화합니다."""
    log_level = getattr(logging, (level or Config.LOG_LEVEL).upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    # SQLAlchemy 엔진 로그는 DEBUG 레벨에서만 출력
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if log_level <= logging.DEBUG else logging.WARNING
    )
