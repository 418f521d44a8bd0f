from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.utils.db import get_db
from app.utils.cache import get_cache_client
from app.core.webstory_service import (
    WebStoryNotFoundError,
    WebStoryValidationError,
    create_webstory,
    get_webstory_by_id,
    update_webstory,
)
from app.schemas.webstory_schema import (
    ListParams,
    WebStoryDetailResponse,
    WebStoryRequest,
    WebStoryOut,
    WebStoryResponse,
    WebStoryWithSlidesOut,
)
from app.api.common import INTERNAL_ERROR_DETAIL, list_params, not_found, query_list, verify_admin_token
import logging

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/admin/webstories",
    tags=["WebStories (admin)"],
    dependencies=[Depends(verify_admin_token)],
)

@router.get("/")
def get_admin_webstories(params: ListParams = Depends(list_params), db: Session = Depends(get_db)):
    """공개 여부와 관계없이 웹스토리 목록을 조회합니다."""
    try:
        return query_list(db, params, published_only=False)
    except WebStoryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.get("/{webstory_id}", response_model=WebStoryDetailResponse)
def get_admin_webstory_by_id(webstory_id: int, db: Session = Depends(get_db)):
    try:
        return {"webstory": WebStoryWithSlidesOut.model_validate(get_webstory_by_id(db, webstory_id))}
    except WebStoryNotFoundError:
        raise not_found()
    except SQLAlchemyError as e:
        logger.error(f"Error fetching webstory {webstory_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)

@router.post("/", response_model=WebStoryResponse, status_code=status.HTTP_201_CREATED)
def create_webstory_route(request: WebStoryRequest, db: Session = Depends(get_db), cache=Depends(get_cache_client)):
    """웹스토리와 슬라이드를 생성합니다."""
    try:
        webstory = create_webstory(db, cache, request.webstory)
        return {"webstory": WebStoryOut.model_validate(webstory)}
    except WebStoryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Error creating webstory: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Failed to create webstory")

@router.put("/{webstory_id}", response_model=WebStoryResponse)
def update_webstory_route(webstory_id: int, request: WebStoryRequest, db: Session = Depends(get_db), cache=Depends(get_cache_client)):
    """웹스토리 전체 필드를 덮어쓰고, 슬라이드가 주어지면 전부 교체합니다."""
    try:
        webstory = update_webstory(db, cache, webstory_id, request.webstory)
        return {"webstory": WebStoryOut.model_validate(webstory)}
    except WebStoryNotFoundError:
        raise not_found()
    except WebStoryValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError as e:
        logger.error(f"Error updating webstory {webstory_id}: {e}")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=INTERNAL_ERROR_DETAIL)
