from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.utils.db import get_db
from app.core.webstory_service import (
    WebStoryNotFoundError,
    WebStoryValidationError,
    get_webstory_by_id,
    get_webstory_by_slug,
)
from app.schemas.webstory_schema import ListParams, WebStoryDetailResponse, WebStoryWithSlidesOut
from app.api.common import INTERNAL_ERROR_DETAIL, list_params, not_found, query_list
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/webstories",
    tags=["WebStories"]
)

@router.get("/")
def get_webstories(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """공개된 웹스토리 목록을 페이지 단위로 조회합니다."""
    try:
        return query_list(db, params, published_only=True)
    except WebStoryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/by-slug/{slug}", response_model=WebStoryDetailResponse)
def get_webstory_by_slug_route(slug: str, db: Session = Depends(get_db)):
    """slug 로 웹스토리와 슬라이드를 조회합니다."""
    try:
        return {"webstory": WebStoryWithSlidesOut.model_validate(get_webstory_by_slug(db, slug))}
    except WebStoryNotFoundError:
        raise not_found()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching webstory by slug '{slug}': {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)

@router.get("/by-id/{webstory_id}", response_model=WebStoryDetailResponse)
def get_webstory_by_id_route(webstory_id: int, db: Session = Depends(get_db)):
    """id 로 웹스토리와 슬라이드를 조회합니다."""
    try:
        return {"webstory": WebStoryWithSlidesOut.model_validate(get_webstory_by_id(db, webstory_id))}
    except WebStoryNotFoundError:
        raise not_found()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching webstory {webstory_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)
