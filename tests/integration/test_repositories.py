"""Integration tests for the SQLAlchemy repositories against in-memory SQLite."""

from datetime import datetime, timezone

import pytest
from sqlalchemy import delete, text

from app.domain.entities import Article, ArticleComment
from app.domain.exceptions import ConstraintViolationError, EntityNotFoundError, ValidationError
from app.infrastructure.database.models import ArticleModel
from app.infrastructure.database.repositories import (
    SQLAlchemyArticleCommentRepository,
    SQLAlchemyArticleRepository,
)

ACTOR = "bitstudy"


@pytest.fixture
def articles(db_session) -> SQLAlchemyArticleRepository:
    return SQLAlchemyArticleRepository(db_session)


@pytest.fixture
def comments(db_session) -> SQLAlchemyArticleCommentRepository:
    return SQLAlchemyArticleCommentRepository(db_session)


async def _article_with_comments(articles, comments, title: str, n: int) -> Article:
    article = await articles.save(Article.create(title, f"{title} body"), ACTOR)
    for i in range(n):
        await comments.save(ArticleComment.create(article, f"{title} comment {i}"), ACTOR)
    return article


@pytest.mark.asyncio
async def test_article_and_comment_lifecycle(articles, comments):
    article = await articles.save(Article.create("T1", "C1", None), ACTOR)
    assert article.id == 1
    assert article.created_by == ACTOR
    assert article.modified_by == ACTOR
    assert article.created_at is not None
    assert article.modified_at is not None

    comment = await comments.save(ArticleComment.create(article, "hi"), ACTOR)
    assert comment.id == 1
    assert comment.article_id == 1

    assert await comments.find_by_article_id(1) == [comment]

    await articles.delete(article)
    assert await articles.find_by_id(1) is None
    assert await comments.find_by_id(1) is None


@pytest.mark.asyncio
async def test_save_then_find_round_trip(articles):
    original = Article.create("Round trip", "Body text", "#trip")
    saved = await articles.save(original, ACTOR)
    assert saved is original

    found = await articles.find_by_id(original.id)
    assert found == original
    assert (found.title, found.content, found.hashtag) == ("Round trip", "Body text", "#trip")
    assert found.created_at is not None
    assert found.modified_at is not None
    assert found.created_by == found.modified_by == ACTOR


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(articles, comments):
    assert await articles.find_by_id(404) is None
    assert await comments.find_by_id(404) is None


@pytest.mark.asyncio
async def test_find_all_is_stable_within_unit_of_work(articles):
    for i in range(5):
        await articles.save(Article.create(f"T{i}", f"C{i}"), ACTOR)

    first = [a.id for a in await articles.find_all()]
    second = [a.id for a in await articles.find_all()]
    assert first == second == sorted(first)
    assert [a.id for a in await articles.find_all(skip=1, limit=2)] == first[1:3]


@pytest.mark.asyncio
async def test_find_all_sees_pending_changes(articles, db_session):
    db_session.add(
        ArticleModel(
            title="pending",
            content="not flushed yet",
            created_at=datetime.now(timezone.utc),
            created_by=ACTOR,
            modified_at=datetime.now(timezone.utc),
            modified_by=ACTOR,
        )
    )
    assert [a.title for a in await articles.find_all()] == ["pending"]


@pytest.mark.asyncio
async def test_update_stamps_modifier_and_keeps_creator(articles):
    article = await articles.save(Article.create("T", "C"), ACTOR)
    created_at = article.created_at

    loaded = await articles.find_by_id(article.id)
    loaded.set_hashtag("#updated")
    saved = await articles.save(loaded, "admin")

    again = await articles.find_by_id(article.id)
    assert again.hashtag == "#updated"
    assert saved.created_by == ACTOR
    assert saved.modified_by == "admin"
    assert saved.created_at == created_at
    assert saved.modified_at >= created_at
    assert not saved.is_dirty


@pytest.mark.asyncio
async def test_saving_unchanged_entity_does_not_restamp(articles):
    article = await articles.save(Article.create("T", "C"), ACTOR)
    loaded = await articles.find_by_id(article.id)

    saved = await articles.save(loaded, "someone-else")
    assert saved.modified_by == ACTOR
    assert saved.modified_at == article.modified_at


@pytest.mark.asyncio
async def test_update_of_missing_article_raises(articles):
    ghost = Article(id=99, title="T", content="C")
    ghost.set_title("T2")
    with pytest.raises(EntityNotFoundError):
        await articles.save(ghost, ACTOR)


@pytest.mark.asyncio
async def test_invalid_actor_is_rejected_before_any_write(articles):
    with pytest.raises(ValidationError):
        await articles.save(Article.create("T", "C"), "")
    with pytest.raises(ValidationError):
        await articles.save(Article.create("T", "C"), "x" * 101)
    assert await articles.count() == 0


@pytest.mark.asyncio
async def test_invalid_article_is_never_persisted(articles):
    before = await articles.count()
    with pytest.raises(ValidationError):
        await articles.save(Article.create("", "C", None), ACTOR)
    with pytest.raises(ValidationError):
        await articles.save(Article.create("T", "x" * 10_001), ACTOR)
    assert await articles.count() == before


@pytest.mark.asyncio
async def test_delete_cascades_exactly_the_articles_comments(articles, comments):
    doomed = await _article_with_comments(articles, comments, "doomed", 3)
    survivor = await _article_with_comments(articles, comments, "survivor", 2)

    article_count = await articles.count()
    comment_count = await comments.count()

    await articles.delete(doomed)

    assert await articles.count() == article_count - 1
    assert await comments.count() == comment_count - 3
    assert await comments.find_by_article_id(doomed.id) == []
    assert await comments.count_by_article_id(survivor.id) == 2


@pytest.mark.asyncio
async def test_delete_article_without_comments(articles, comments):
    article = await articles.save(Article.create("T", "C"), ACTOR)
    await articles.delete(article)
    assert await articles.count() == 0
    assert await comments.count() == 0


@pytest.mark.asyncio
async def test_delete_missing_entities_raises(articles, comments):
    with pytest.raises(EntityNotFoundError):
        await articles.delete(Article(id=5, title="T", content="C"))
    with pytest.raises(EntityNotFoundError):
        await articles.delete(Article.create("T", "C"))
    with pytest.raises(EntityNotFoundError):
        await comments.delete(ArticleComment(id=5, article_id=1, content="x"))


@pytest.mark.asyncio
async def test_schema_level_cascade_removes_comments(articles, comments, db_session):
    article = await _article_with_comments(articles, comments, "raw", 2)

    await db_session.execute(delete(ArticleModel).where(ArticleModel.id == article.id))
    db_session.expunge_all()

    assert await comments.count_by_article_id(article.id) == 0


@pytest.mark.asyncio
async def test_comment_for_missing_article_is_a_constraint_violation(comments):
    with pytest.raises(ConstraintViolationError):
        await comments.save(ArticleComment(article_id=999, content="orphan"), ACTOR)
    assert await comments.count() == 0


@pytest.mark.asyncio
async def test_moving_comment_to_missing_article_is_a_constraint_violation(articles, comments):
    article = await _article_with_comments(articles, comments, "home", 1)
    comment = (await comments.find_by_article_id(article.id))[0]

    comment.article_id = 999
    comment.set_content("moved")
    with pytest.raises(ConstraintViolationError):
        await comments.save(comment, ACTOR)


@pytest.mark.asyncio
async def test_comment_update_stamps_modifier(articles, comments):
    article = await _article_with_comments(articles, comments, "a", 1)
    other = await articles.save(Article.create("b", "b body"), ACTOR)
    comment = (await comments.find_by_article_id(article.id))[0]

    comment.set_article(other)
    comment.set_content("moved over")
    saved = await comments.save(comment, "admin")

    assert saved.article_id == other.id
    assert saved.created_by == ACTOR
    assert saved.modified_by == "admin"
    assert [c.id for c in await comments.find_by_article_id(other.id)] == [comment.id]


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(articles):
    first = await articles.save(Article.create("T1", "C1"), ACTOR)
    await articles.delete(first)
    second = await articles.save(Article.create("T2", "C2"), ACTOR)
    assert second.id > first.id


@pytest.mark.asyncio
async def test_comments_of_article_ordered_by_id(articles, comments):
    article = await _article_with_comments(articles, comments, "ordered", 4)
    listed = await comments.find_by_article_id(article.id)
    assert [c.id for c in listed] == sorted(c.id for c in listed)
    assert [c.id for c in await comments.find_by_article_id(article.id, skip=2, limit=5)] == [
        c.id for c in listed[2:]
    ]


@pytest.mark.asyncio
async def test_reloaded_timestamps_are_utc_aware(articles, db_session):
    article = await articles.save(Article.create("T", "C"), ACTOR)
    created_at = article.created_at
    db_session.expunge_all()

    found = await articles.find_by_id(article.id)
    assert found.created_at.tzinfo is not None
    assert found.created_at.utcoffset() == timezone.utc.utcoffset(None)
    assert found.created_at == created_at
    assert found.modified_at >= found.created_at


@pytest.mark.asyncio
async def test_insert_ignores_caller_supplied_audit_fields(articles):
    article = Article.create("T", "C")
    article.created_by = "evil"
    article.created_at = datetime(2000, 1, 1, tzinfo=timezone.utc)
    article.modified_by = "evil"

    saved = await articles.save(article, ACTOR)
    assert saved.created_by == ACTOR
    assert saved.modified_by == ACTOR
    assert saved.created_at > datetime(2000, 1, 1, tzinfo=timezone.utc)

    found = await articles.find_by_id(saved.id)
    assert (found.created_by, found.created_at) == (ACTOR, saved.created_at)


@pytest.mark.asyncio
async def test_saving_unchanged_entity_replaces_direct_assignments(articles):
    article = await articles.save(Article.create("T", "C"), ACTOR)
    loaded = await articles.find_by_id(article.id)

    loaded.title = "assigned directly"
    saved = await articles.save(loaded, ACTOR)

    assert saved.title == "T"
    assert (await articles.find_by_id(article.id)).title == "T"


@pytest.mark.asyncio
async def test_failed_article_delete_leaves_comments_after_rollback(articles, comments, db_session):
    await db_session.execute(
        text(
            "CREATE TRIGGER block_article_delete BEFORE DELETE ON articles "
            "BEGIN SELECT RAISE(ABORT, 'articles are locked'); END"
        )
    )
    article = await _article_with_comments(articles, comments, "locked", 2)
    await db_session.commit()

    with pytest.raises(ConstraintViolationError):
        await articles.delete(article)
    await db_session.rollback()

    assert await articles.count() == 1
    assert await comments.count() == 2
    assert await comments.count_by_article_id(article.id) == 2
