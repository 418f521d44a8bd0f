"""
Tests for the webstory service layer against an in-memory database.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from app.core.webstory_service import (
    WebStoryNotFoundError,
    WebStoryValidationError,
    create_webstory,
    get_webstory_by_id,
    get_webstory_by_slug,
    list_webstories,
    update_webstory,
)
from app.models.webstory_models import Slide, WebStory
from app.schemas.webstory_schema import ListParams, WebStoryIn


def make_story(**overrides):
    data = {
        "mainTitle": "Top 10 Cars 2024",
        "storyType": "listicle",
        "storyLanguage": "en",
        "published": True,
        "slides": [
            {"title": "One", "image1": "a.jpg"},
            {"title": "Two", "image1": "b.jpg"},
        ],
    }
    data.update(overrides)
    return WebStoryIn.model_validate(data)


def test_create_derives_slug_and_author(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story())
    assert webstory.slug == "top-10-cars-2024"
    assert webstory.author == "Carprices"
    assert webstory.published_at is not None
    assert [s.title for s in webstory.slides] == ["One", "Two"]
    assert cache.deleted == ["webstory"]


def test_create_unpublished_discards_published_at(db_session, cache):
    data = make_story(published=False, publishedAt="2020-01-01T00:00:00Z")
    webstory = create_webstory(db_session, cache, data)
    assert webstory.published_at is None


def test_create_without_title_or_slug_is_rejected(db_session, cache):
    with pytest.raises(WebStoryValidationError):
        create_webstory(db_session, cache, make_story(mainTitle=None))
    assert cache.deleted == []


def test_create_duplicate_slug_rolls_back(db_session, cache):
    create_webstory(db_session, cache, make_story())
    with pytest.raises(IntegrityError):
        create_webstory(db_session, cache, make_story(slides=[{"title": "x"}] * 3))

    assert db_session.query(WebStory).count() == 1
    assert db_session.query(Slide).count() == 2
    assert cache.deleted == ["webstory"]


def test_update_unknown_id(db_session, cache):
    with pytest.raises(WebStoryNotFoundError):
        update_webstory(db_session, cache, 999, make_story())


def test_update_keeps_published_at_when_flag_unchanged(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story())
    original = webstory.published_at

    updated = update_webstory(db_session, cache, webstory.id, make_story(mainTitle="Renamed", slides=[]))
    assert updated.published_at == original
    assert updated.slug == "renamed"


def test_update_publish_flips(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story(published=False))
    assert webstory.published_at is None

    updated = update_webstory(db_session, cache, webstory.id, make_story(published=True))
    assert updated.published is True
    assert updated.published_at is not None

    updated = update_webstory(db_session, cache, webstory.id, make_story(published=False))
    assert updated.published is False
    assert updated.published_at is None


def test_update_replaces_slides(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story())
    new_slides = [{"title": "A"}, {"title": "B"}, {"title": "C"}]

    update_webstory(db_session, cache, webstory.id, make_story(slides=new_slides))

    fetched = get_webstory_by_id(db_session, webstory.id)
    assert [s.title for s in fetched.slides] == ["A", "B", "C"]
    assert db_session.query(Slide).count() == 3


def test_update_without_slides_keeps_existing(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story())
    update_webstory(db_session, cache, webstory.id, make_story(slides=[]))
    assert db_session.query(Slide).filter(Slide.web_story_id == webstory.id).count() == 2
    assert cache.deleted == ["webstory", "webstory"]


def test_update_overwrites_absent_fields(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story(metaTitle="Meta", url="https://x"))
    updated = update_webstory(db_session, cache, webstory.id, make_story())
    assert updated.meta_title is None
    assert updated.url is None


def test_get_by_slug_and_missing(db_session, cache):
    create_webstory(db_session, cache, make_story(published=False))
    # lookup does not filter on published
    assert get_webstory_by_slug(db_session, "top-10-cars-2024").published is False
    with pytest.raises(WebStoryNotFoundError):
        get_webstory_by_slug(db_session, "nope")
    with pytest.raises(WebStoryNotFoundError):
        get_webstory_by_id(db_session, 42)


def test_list_pagination_and_published_filter(db_session, cache):
    for title in ["First", "Second", "Third"]:
        create_webstory(db_session, cache, make_story(mainTitle=title))
    create_webstory(db_session, cache, make_story(mainTitle="Draft", published=False))

    result = list_webstories(db_session, ListParams(page_size=2, current_page=1))
    assert result["count"] == 3
    assert result["total_page"] == 2
    assert [w.main_title for w in result["webstories"]] == ["Third", "Second"]

    result = list_webstories(db_session, ListParams(page_size=2, current_page=2))
    assert [w.main_title for w in result["webstories"]] == ["First"]

    admin = list_webstories(db_session, ListParams(page_size=10), published_only=False)
    assert admin["count"] == 4


def test_list_is_all_uses_page_size_for_total_page(db_session, cache):
    for title in ["A", "B", "C"]:
        create_webstory(db_session, cache, make_story(mainTitle=title))

    result = list_webstories(db_session, ListParams(is_all=True, page_size=2))
    assert len(result["webstories"]) == 3
    assert result["total_page"] == 2


def test_list_search_and_order_by(db_session, cache):
    for title in ["Electric SUV", "Family Sedan", "Compact suv"]:
        create_webstory(db_session, cache, make_story(mainTitle=title))

    result = list_webstories(db_session, ListParams(search="suv", order_by="mainTitle"))
    assert [w.main_title for w in result["webstories"]] == ["Compact suv", "Electric SUV"]

    with pytest.raises(WebStoryValidationError):
        list_webstories(db_session, ListParams(order_by="password"))


def test_create_with_symbol_only_title_is_rejected(db_session, cache):
    with pytest.raises(WebStoryValidationError):
        create_webstory(db_session, cache, make_story(mainTitle="!!! ???"))
    assert db_session.query(WebStory).count() == 0
    assert cache.deleted == []


def test_update_duplicate_slug_rolls_back(db_session, cache):
    story_a = create_webstory(
        db_session, cache, make_story(mainTitle="Story A", slides=[{"title": "a1"}, {"title": "a2"}])
    )
    create_webstory(db_session, cache, make_story(mainTitle="Story B"))
    story_a_id = story_a.id

    with pytest.raises(IntegrityError):
        update_webstory(
            db_session, cache, story_a_id, make_story(mainTitle="Story A", slug="story-b", slides=[{"title": "new"}])
        )
    assert cache.deleted == ["webstory", "webstory"]

    db_session.expire_all()
    fetched = get_webstory_by_id(db_session, story_a_id)
    assert fetched.slug == "story-a"
    assert [s.title for s in fetched.slides] == ["a1", "a2"]


def test_null_published_is_treated_as_false(db_session, cache):
    webstory = create_webstory(db_session, cache, make_story(published=None))
    assert webstory.published is False
    assert webstory.published_at is None


def test_list_order_by_meta_title(db_session, cache):
    create_webstory(db_session, cache, make_story(mainTitle="One", metaTitle="b"))
    create_webstory(db_session, cache, make_story(mainTitle="Two", metaTitle="a"))

    result = list_webstories(db_session, ListParams(order_by="metaTitle"))
    assert [w.main_title for w in result["webstories"]] == ["Two", "One"]
