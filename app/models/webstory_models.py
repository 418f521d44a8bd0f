from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import relationship
from app.utils.db import Base

class WebStory(Base):
    __tablename__ = "web_stories"

    id = Column(Integer, primary_key=True, index=True)
    main_title = Column(String(255), nullable=True)
    story_type = Column(String(100), nullable=True)
    meta_title = Column(String(255), nullable=True)
    meta_description = Column(Text, nullable=True)
    slug = Column(String(255), unique=True, index=True, nullable=False)
    story_language = Column(String(20), nullable=True)
    published = Column(Boolean, nullable=False, default=False)
    published_at = Column(DateTime(timezone=True), nullable=True)
    author = Column(String(100), nullable=False)
    url = Column(String(512), nullable=True)
    url_name = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    # 슬라이드는 id 오름차순이 곧 표시 순서
    slides = relationship(
        "Slide",
        back_populates="web_story",
        cascade="all, delete-orphan",
        order_by="Slide.id",
    )

class Slide(Base):
    __tablename__ = "slides"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=True)
    image1 = Column(String(512), nullable=True)
    image2 = Column(String(512), nullable=True)
    subtitle = Column(Text, nullable=True)
    theme = Column(String(100), nullable=True)
    web_story_id = Column(Integer, ForeignKey("web_stories.id", ondelete="CASCADE"), nullable=False, index=True)

    web_story = relationship("WebStory", back_populates="slides")
