from fastapi import Depends, FastAPI, HTTPException, status
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.utils.logger import setup_logging
from app.utils.db import Base, engine, get_db
from app.models import webstory_models  # noqa: F401  테이블 메타데이터 등록
from app.api.webstory_router import router as webstory_router
from app.api.admin_webstory_router import router as admin_webstory_router
import logging

logger = logging.getLogger(__name__)

def create_app():
    setup_logging()
    app = FastAPI(title="WebStory Service")

    app.include_router(webstory_router)
    app.include_router(admin_webstory_router)

    @app.on_event("startup")
    async def startup_event():
        logger.info("Application startup event triggered.")
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created/checked.")

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Application shutdown event triggered.")
        engine.dispose()

    @app.get("/")
    async def root():
        return {"message": "WebStory Service is running"}

    @app.get("/health")
    def health(db: Session = Depends(get_db)):
        try:
            db.execute(text("SELECT 1"))
            return {"status": "ok", "database": "connected"}
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Database unavailable.")

    return app
