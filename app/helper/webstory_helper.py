import logging
from datetime import datetime, timezone
from typing import Optional
from slugify import slugify
from sqlalchemy.orm import Query, selectinload
from app.models.webstory_models import WebStory
from app.schemas.webstory_schema import ListParams

logger = logging.getLogger(__name__)

# 정렬 가능한 필드 (쿼리 파라미터 이름 -> 컬럼)
ORDERABLE_FIELDS = {
    "id": WebStory.id,
    "mainTitle": WebStory.main_title,
    "storyType": WebStory.story_type,
    "metaTitle": WebStory.meta_title,
    "metaDescription": WebStory.meta_description,
    "slug": WebStory.slug,
    "storyLanguage": WebStory.story_language,
    "published": WebStory.published,
    "author": WebStory.author,
    "url": WebStory.url,
    "urlName": WebStory.url_name,
    "publishedAt": WebStory.published_at,
    "createdAt": WebStory.created_at,
    "updatedAt": WebStory.updated_at,
}

class MissingFieldsError(ValueError):
    def __init__(self, fields):
        self.fields = list(fields)
        super().__init__(f"Missing fields: {', '.join(self.fields)}")

class InvalidOrderByError(ValueError):
    pass

def require_fields(**fields):
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise MissingFieldsError(missing)

def derive_slug(main_title: Optional[str], slug: Optional[str] = None) -> str:
    if slug:
        return slug
    require_fields(mainTitle=main_title)
    derived = slugify(main_title, lowercase=True)
    # 기호/이모지만 있는 제목은 빈 slug 가 됨
    require_fields(slug=derived)
    return derived

def now_utc() -> datetime:
    return datetime.now(timezone.utc)

def published_at_for_create(published: bool) -> Optional[datetime]:
    """생성 시에는 요청의 publishedAt 값을 무시하고 published 플래그로만 결정합니다."""
    return now_utc() if published else None

def published_at_for_update(published: bool, stored_published: bool, stored_published_at: Optional[datetime]) -> Optional[datetime]:
    """
    수정 시에는 저장된 published 플래그와 비교합니다.
    - 변경 없음: 기존 publishedAt 유지
    - false -> true: 현재 시각
    - true -> false: None
    """
    if bool(published) == bool(stored_published):
        return stored_published_at
    return now_utc() if published else None

def total_pages(count: int, page_size: int) -> int:
    # isAll 이어도 pageSize 기준으로 계산
    return -(-count // page_size)

def build_list_query(query: Query, params: ListParams, published_only: bool) -> Query:
    if params.search:
        query = query.filter(WebStory.main_title.ilike(f"%{params.search}%"))
    if published_only:
        query = query.filter(WebStory.published.is_(True))

    if params.order_by:
        column = ORDERABLE_FIELDS.get(params.order_by)
        if column is None:
            raise InvalidOrderByError(f"Cannot order by '{params.order_by}'")
        query = query.order_by(column.asc(), WebStory.id.asc())
    else:
        query = query.order_by(WebStory.published_at.desc(), WebStory.id.desc())

    if params.is_all:
        return query

    offset = (params.current_page - 1) * params.page_size
    return query.options(selectinload(WebStory.slides)).limit(params.page_size).offset(offset)
