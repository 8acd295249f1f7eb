"""Unit tests for the async entity repositories."""

import pytest

from bookshelf.core.errors import PersistenceError
from bookshelf.entities import Author, AuthorRepository, Book, BookRepository


class TestAuthorRepository:
    """Test author persistence."""

    @pytest.mark.asyncio
    async def test_create_assigns_id(self, database):
        """Should persist an author and return the domain entity."""
        async with database.session_scope() as session:
            author = await AuthorRepository(session).create({"name": "Ursula", "country": "US"})

        assert isinstance(author, Author)
        assert author.id is not None
        assert author.name == "Ursula"
        assert author.created_at is not None

    @pytest.mark.asyncio
    async def test_find_by_equality_and_list(self, database):
        """Should match field equality and lists of values, ordered by id."""
        async with database.session_scope() as session:
            repo = AuthorRepository(session)
            first = await repo.create({"name": "Ursula", "country": "US"})
            second = await repo.create({"name": "Terry", "country": "UK"})
            await repo.create({"name": "Italo", "country": "IT"})

            by_country = await repo.find({"country": "UK"})
            by_ids = await repo.find({"id": [second.id, first.id]})
            everyone = await repo.find({})

        assert [a.name for a in by_country] == ["Terry"]
        assert [a.id for a in by_ids] == [first.id, second.id]
        assert len(everyone) == 3

    @pytest.mark.asyncio
    async def test_unknown_attribute_rejected(self, database):
        """Should raise a persistence error naming the attribute."""
        async with database.session_scope() as session:
            repo = AuthorRepository(session)
            with pytest.raises(PersistenceError) as exc_info:
                await repo.find({"shoeSize": 9})

        assert exc_info.value.code == "E_INVALID_CRITERIA"
        assert exc_info.value.attr_names == ["shoeSize"]

    @pytest.mark.asyncio
    async def test_operator_criteria_rejected(self, database):
        """Should reject nested operator maps."""
        async with database.session_scope() as session:
            with pytest.raises(PersistenceError):
                await AuthorRepository(session).find({"name": {"contains": "U"}})

    @pytest.mark.asyncio
    async def test_update_one(self, database):
        """Should update the first match and return it."""
        async with database.session_scope() as session:
            repo = AuthorRepository(session)
            author = await repo.create({"name": "Ursula", "country": "US"})
            updated = await repo.update_one({"country": "CA"}, {"id": author.id})

        assert updated.id == author.id
        assert updated.country == "CA"
        assert updated.name == "Ursula"

    @pytest.mark.asyncio
    async def test_update_and_destroy_missing(self, database):
        """Should return None when nothing matches."""
        async with database.session_scope() as session:
            repo = AuthorRepository(session)
            assert await repo.update_one({"name": "X"}, {"id": 404}) is None
            assert await repo.destroy_one({"id": 404}) is None

    @pytest.mark.asyncio
    async def test_destroy_one(self, database):
        """Should delete the row and return what was deleted."""
        async with database.session_scope() as session:
            repo = AuthorRepository(session)
            author = await repo.create({"name": "Ursula", "country": "US"})
            deleted = await repo.destroy_one({"id": author.id})
            remaining = await repo.find({})

        assert deleted.name == "Ursula"
        assert remaining == []


class TestBookRepository:
    """Test book persistence."""

    @pytest.mark.asyncio
    async def test_find_by_author(self, database):
        """Should accept author and authorId as criteria for the foreign key."""
        async with database.session_scope() as session:
            author = await AuthorRepository(session).create({"name": "Ursula"})
            repo = BookRepository(session)
            book = await repo.create(
                {"title": "Earthsea", "year_published": "1968", "author_id": author.id}
            )

            by_author = await repo.find({"author": author.id})
            by_author_id = await repo.find({"authorId": author.id, "yearPublished": "1968"})

        assert isinstance(book, Book)
        assert book.genre == "UNKNOWN"
        assert [b.id for b in by_author] == [book.id]
        assert [b.id for b in by_author_id] == [book.id]

    @pytest.mark.asyncio
    async def test_foreign_key_enforced(self, database):
        """Should raise an integrity error for a missing author."""
        with pytest.raises(PersistenceError) as exc_info:
            async with database.session_scope() as session:
                await BookRepository(session).create(
                    {"title": "Orphan", "year_published": "2000", "author_id": 12345}
                )

        assert exc_info.value.code == "E_INTEGRITY"
