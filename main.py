from app import create_app
from app.config.config import Config

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host=Config.API_HOST, port=Config.API_PORT)
