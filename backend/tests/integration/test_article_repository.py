"""Integration tests for the SQLAlchemy repositories on SQLite."""

import pytest
from sqlalchemy import func, select

from conduit.domain.entities import Article, ArticleContents, ArticleUpdateRequest, User
from conduit.domain.exceptions import EntityNotFoundError
from conduit.infrastructure.database.models import CommentModel, article_favorites
from conduit.infrastructure.database.repositories import (
    SQLAlchemyArticleRepository,
    SQLAlchemyUserRepository,
)


def _new_article(author: User, title: str = "Title1") -> Article:
    return Article(author=author, contents=ArticleContents(title=title, description="Desc", body="Body"))


async def _count(session, statement) -> int:
    return (await session.execute(statement)).scalar_one()


@pytest.mark.asyncio
async def test_user_repository_lookup(session, users):
    repository = SQLAlchemyUserRepository(session)

    assert await repository.get_by_id(users["alice"].id) == users["alice"]
    assert (await repository.get_by_username("bob")).id == users["bob"].id
    assert await repository.get_by_username("nobody") is None
    assert (await repository.get_by_email("carol@example.com")).username == "carol"
    assert await repository.get_by_email("nobody@example.com") is None


@pytest.mark.asyncio
async def test_create_assigns_identity_and_timestamps(session, users):
    repository = SQLAlchemyArticleRepository(session)

    saved = await repository.create(_new_article(users["alice"], "Hello World"))

    assert saved.id is not None
    assert saved.slug == "hello-world"
    assert saved.created_at is not None
    assert saved.author == users["alice"]
    assert (await repository.get_by_id(saved.id)) == saved


@pytest.mark.asyncio
async def test_favorites_are_stored_in_join_table(session, users):
    repository = SQLAlchemyArticleRepository(session)
    article = await repository.create(_new_article(users["alice"]))

    article.after_user_favorites_article(users["bob"])
    article.after_user_favorites_article(users["carol"])
    saved = await repository.update(article)

    assert saved.favorited_count == 2
    assert await _count(session, select(func.count()).select_from(article_favorites)) == 2

    saved.after_user_unfavorites_article(users["bob"])
    saved = await repository.update(saved)

    assert saved.favorited_by == {users["carol"]}
    assert await _count(session, select(func.count()).select_from(article_favorites)) == 1


@pytest.mark.asyncio
async def test_comments_are_added_and_removed_with_aggregate(session, users):
    repository = SQLAlchemyArticleRepository(session)
    article = await repository.create(_new_article(users["alice"]))

    kept = article.add_comment(users["bob"], "nice")
    dropped = article.add_comment(users["carol"], "meh")
    await repository.update(article)

    assert kept.id is not None and dropped.id is not None
    assert kept.article_id == article.id

    reloaded = await repository.get_by_id(article.id)
    reloaded.remove_comment_by_user(users["alice"], dropped.id)
    saved = await repository.update(reloaded)

    assert {c.id for c in saved.comments} == {kept.id}
    assert await _count(session, select(func.count()).select_from(CommentModel)) == 1


@pytest.mark.asyncio
async def test_update_persists_partial_contents(session_factory, session, users):
    repository = SQLAlchemyArticleRepository(session)
    article = await repository.create(_new_article(users["alice"]))

    article.update_article(ArticleUpdateRequest(title_to_update="Brand New Title"))
    await repository.update(article)
    await session.commit()

    async with session_factory() as fresh:
        reloaded = await SQLAlchemyArticleRepository(fresh).get_by_id(article.id)

    assert reloaded.title == "Brand New Title"
    assert reloaded.slug == "brand-new-title"
    assert reloaded.contents.description == "Desc"
    assert reloaded.contents.body == "Body"


@pytest.mark.asyncio
async def test_update_unknown_article_raises(session, users):
    repository = SQLAlchemyArticleRepository(session)
    ghost = _new_article(users["alice"])
    ghost.id = 12345

    with pytest.raises(EntityNotFoundError):
        await repository.update(ghost)


@pytest.mark.asyncio
async def test_delete_cascades_to_comments_and_favorites(session, users):
    repository = SQLAlchemyArticleRepository(session)
    article = await repository.create(_new_article(users["alice"]))
    article.add_comment(users["bob"], "nice")
    article.after_user_favorites_article(users["bob"])
    await repository.update(article)

    assert await repository.delete(article.id) is True

    assert await repository.get_by_id(article.id) is None
    assert await _count(session, select(func.count()).select_from(CommentModel)) == 0
    assert await _count(session, select(func.count()).select_from(article_favorites)) == 0
    assert await repository.delete(article.id) is False


@pytest.mark.asyncio
async def test_get_all_filters_by_author_and_favorites(session, users):
    repository = SQLAlchemyArticleRepository(session)
    first = await repository.create(_new_article(users["alice"], "First"))
    await repository.create(_new_article(users["alice"], "Second"))
    bobs = await repository.create(_new_article(users["bob"], "Bob's"))
    bobs.after_user_favorites_article(users["carol"])
    await repository.update(bobs)

    assert len(await repository.get_all()) == 3
    assert len(await repository.get_all(limit=2)) == 2
    assert {a.title for a in await repository.get_all(author_id=users["alice"].id)} == {"First", "Second"}
    assert [a.id for a in await repository.get_all(favorited_by_id=users["carol"].id)] == [bobs.id]

    found = await repository.get_by_author_and_title(users["alice"].id, "First")
    assert found.id == first.id
    assert await repository.get_by_author_and_title(users["bob"].id, "First") is None
