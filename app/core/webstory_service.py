import logging
from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload
from app.config.config import Config
from app.helper.webstory_helper import (
    build_list_query,
    derive_slug,
    published_at_for_create,
    published_at_for_update,
    total_pages,
)
from app.models.webstory_models import Slide, WebStory
from app.schemas.webstory_schema import ListParams, SlideIn, WebStoryIn
from app.utils.cache import invalidate_cache

logger = logging.getLogger(__name__)

class WebStoryError(Exception):
    pass

class WebStoryNotFoundError(WebStoryError):
    def __init__(self, key):
        self.key = key
        super().__init__(f"WebStory not found: {key}")

class WebStoryValidationError(WebStoryError):
    pass

# --- Internal helpers ---

def _build_slides(slides: List[SlideIn]) -> List[Slide]:
    return [
        Slide(
            title=slide.title,
            image1=slide.image1,
            image2=slide.image2,
            subtitle=slide.subtitle,
            theme=slide.theme,
        )
        for slide in slides
    ]

def _commit(db: Session, action: str):
    try:
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Error during webstory {action}, transaction rolled back: {e}")
        raise

def _slug_or_error(main_title: Optional[str], slug: Optional[str]) -> str:
    try:
        return derive_slug(main_title, slug)
    except ValueError as e:
        raise WebStoryValidationError(str(e)) from e

# --- Write operations ---

def create_webstory(db: Session, cache, data: WebStoryIn) -> WebStory:
    slug = _slug_or_error(data.main_title, data.slug)
    published = bool(data.published)

    webstory = WebStory(
        main_title=data.main_title,
        story_type=data.story_type,
        meta_title=data.meta_title,
        meta_description=data.meta_description,
        slug=slug,
        story_language=data.story_language,
        published=published,
        published_at=published_at_for_create(published),
        author=Config.WEBSTORY_AUTHOR,
        url=data.url,
        url_name=data.url_name,
    )
    # 스토리와 슬라이드는 하나의 트랜잭션으로 저장
    webstory.slides = _build_slides(data.slides)
    db.add(webstory)
    _commit(db, "create")
    db.refresh(webstory)
    logger.info(f"WebStory {webstory.id} created with slug '{webstory.slug}' and {len(data.slides)} slides.")

    invalidate_cache(cache, Config.WEBSTORY_CACHE_KEY)
    return webstory

def update_webstory(db: Session, cache, webstory_id: int, data: WebStoryIn) -> WebStory:
    webstory = db.get(WebStory, webstory_id)
    if webstory is None:
        logger.warning(f"WebStory {webstory_id} not found for update.")
        raise WebStoryNotFoundError(webstory_id)

    slug = _slug_or_error(data.main_title, data.slug)
    published = bool(data.published)
    published_at = published_at_for_update(published, webstory.published, webstory.published_at)

    webstory.main_title = data.main_title
    webstory.story_type = data.story_type
    webstory.meta_title = data.meta_title
    webstory.meta_description = data.meta_description
    webstory.slug = slug
    webstory.story_language = data.story_language
    webstory.published = published
    webstory.published_at = published_at
    webstory.url = data.url
    webstory.url_name = data.url_name

    if data.slides:
        # 전체 교체: delete-orphan 으로 기존 슬라이드 삭제 후 새 목록 삽입
        webstory.slides = _build_slides(data.slides)

    _commit(db, "update")
    db.refresh(webstory)
    logger.info(f"WebStory {webstory.id} updated (published={webstory.published}).")

    invalidate_cache(cache, Config.WEBSTORY_CACHE_KEY)
    return webstory

# --- Read operations ---

def list_webstories(db: Session, params: ListParams, published_only: bool = True) -> Dict[str, Any]:
    try:
        query = build_list_query(db.query(WebStory), params, published_only)
    except ValueError as e:
        raise WebStoryValidationError(str(e)) from e

    # count 는 페이지 제한 없이 같은 필터로 계산
    count_query = build_list_query(db.query(WebStory), params.model_copy(update={"is_all": True}), published_only)
    count = count_query.order_by(None).count()
    webstories = query.all()

    return {
        "webstories": webstories,
        "count": count,
        "total_page": total_pages(count, params.page_size),
    }

def get_webstory_by_id(db: Session, webstory_id: int) -> WebStory:
    webstory = (
        db.query(WebStory)
        .options(selectinload(WebStory.slides))
        .filter(WebStory.id == webstory_id)
        .first()
    )
    if webstory is None:
        logger.warning(f"WebStory {webstory_id} not found.")
        raise WebStoryNotFoundError(webstory_id)
    return webstory

def get_webstory_by_slug(db: Session, slug: str) -> WebStory:
    webstory = (
        db.query(WebStory)
        .options(selectinload(WebStory.slides))
        .filter(WebStory.slug == slug)
        .first()
    )
    if webstory is None:
        logger.warning(f"WebStory with slug '{slug}' not found.")
        raise WebStoryNotFoundError(slug)
    return webstory
