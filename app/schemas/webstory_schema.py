from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    # 요청/응답 JSON은 camelCase (mainTitle, publishedAt, ...)
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class SlideIn(CamelModel):
    title: Optional[str] = None
    image1: Optional[str] = None
    image2: Optional[str] = None
    subtitle: Optional[str] = None
    theme: Optional[str] = None

class WebStoryIn(CamelModel):
    main_title: Optional[str] = None
    story_type: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    slug: Optional[str] = None
    story_language: Optional[str] = None
    slides: List[SlideIn] = Field(default_factory=list)
    published: Optional[bool] = False # null 은 false 로 취급
    published_at: Optional[datetime] = None # 생성/수정 시 서버에서 다시 계산되므로 무시됨
    url: Optional[str] = None
    url_name: Optional[str] = None

class WebStoryRequest(BaseModel):
    webstory: WebStoryIn

class SlideOut(CamelModel):
    id: int
    title: Optional[str] = None
    image1: Optional[str] = None
    image2: Optional[str] = None
    subtitle: Optional[str] = None
    theme: Optional[str] = None
    web_story_id: int

class WebStoryOut(CamelModel):
    id: int
    main_title: Optional[str] = None
    story_type: Optional[str] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    slug: str
    story_language: Optional[str] = None
    published: bool
    published_at: Optional[datetime] = None
    author: str
    url: Optional[str] = None
    url_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

class WebStoryWithSlidesOut(WebStoryOut):
    slides: List[SlideOut] = Field(default_factory=list)

class WebStoryResponse(BaseModel):
    webstory: WebStoryOut

class WebStoryDetailResponse(BaseModel):
    webstory: WebStoryWithSlidesOut

class ListParams(BaseModel):
    """목록 조회 쿼리 파라미터."""
    is_all: bool = False
    page_size: int = 10
    current_page: int = 1
    order_by: Optional[str] = None
    search: Optional[str] = None
