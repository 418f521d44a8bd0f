from typing import Optional
from fastapi import Header, HTTPException, Query, status
from app.config.config import Config
from app.core.webstory_service import list_webstories
from app.schemas.webstory_schema import ListParams, WebStoryOut, WebStoryWithSlidesOut

NOT_FOUND_DETAIL = "WebStory not found"
INTERNAL_ERROR_DETAIL = "Internal server error"

def list_params(
    is_all: bool = Query(False, alias="isAll"),
    page_size: int = Query(Config.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1),
    current_page: int = Query(1, alias="currentPage", ge=1),
    order_by: Optional[str] = Query(None, alias="orderBy"),
    search: Optional[str] = Query(None),
) -> ListParams:
    return ListParams(
        is_all=is_all,
        page_size=page_size,
        current_page=current_page,
        order_by=order_by,
        search=search,
    )

async def verify_admin_token(x_admin_token: Optional[str] = Header(None)):
    """ADMIN_API_TOKEN 이 설정된 경우에만 X-Admin-Token 헤더를 검사합니다."""
    if Config.ADMIN_API_TOKEN and x_admin_token != Config.ADMIN_API_TOKEN:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid admin token.")

def serialize_webstory_page(result: dict, include_slides: bool) -> dict:
    schema = WebStoryWithSlidesOut if include_slides else WebStoryOut
    return {
        "webstories": [
            schema.model_validate(webstory).model_dump(mode="json", by_alias=True)
            for webstory in result["webstories"]
        ],
        "webstoriesCount": result["count"],
        "totalPage": result["total_page"],
    }

def not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)

def query_list(db, params: ListParams, published_only: bool) -> dict:
    result = list_webstories(db, params, published_only=published_only)
    return serialize_webstory_page(result, include_slides=not params.is_all)
