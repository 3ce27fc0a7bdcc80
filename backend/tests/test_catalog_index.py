"""
Tests for the global catalog index.
"""
import asyncio

import pytest

from domain.errors import InvalidArgument
from domain.models import Book


def _book(book_id, owner="pete@x", name="Title", author="Author"):
    return Book(book_id=book_id, name=name, author=author, owner_id=owner)


class TestCatalogIndex:
    def test_list_empty(self, registry):
        assert asyncio.run(registry.catalog_index().list()) == []

    def test_add_and_list_sorted_by_book_id(self, registry):
        index = registry.catalog_index()

        async def scenario():
            await index.add(_book(3))
            await index.add(_book(1))
            await index.add(_book(2))
            return await index.list()

        assert [b.book_id for b in asyncio.run(scenario())] == [1, 2, 3]

    def test_equal_ids_keep_insertion_order(self, registry):
        index = registry.catalog_index()

        async def scenario():
            await index.add(_book(1, owner="jane@y", name="The Hobbit"))
            await index.add(_book(1, owner="pete@x", name="I, Robot"))
            await index.add(_book(2, owner="amy@z", name="Dune"))
            await index.add(_book(1, owner="amy@z", name="Emma"))
            return await index.list()

        books = asyncio.run(scenario())

        assert [(b.book_id, b.owner_id) for b in books] == [
            (1, "jane@y"),
            (1, "pete@x"),
            (1, "amy@z"),
            (2, "amy@z"),
        ]

    def test_re_adding_overwrites_in_place(self, registry):
        index = registry.catalog_index()

        async def scenario():
            await index.add(_book(1, owner="jane@y"))
            await index.add(_book(1, owner="pete@x", name="Old"))
            await index.add(_book(1, owner="jane@y", name="Renamed"))
            return await index.list()

        books = asyncio.run(scenario())

        assert len(books) == 2
        assert books[0] == _book(1, owner="jane@y", name="Renamed")
        assert books[1].owner_id == "pete@x"

    @pytest.mark.parametrize(
        "book",
        [
            Book(book_id=1, name="T", author="A", owner_id=""),
            Book(book_id=None, name="T", author="A", owner_id="pete@x"),
            None,
        ],
    )
    def test_add_rejects_invalid_payload(self, registry, book):
        index = registry.catalog_index()

        with pytest.raises(InvalidArgument, match="Invalid book payload"):
            asyncio.run(index.add(book))

        assert asyncio.run(index.list()) == []

    def test_purge_owner_removes_only_that_owner(self, registry):
        index = registry.catalog_index()

        async def scenario():
            await index.add(_book(1, owner="pete@x"))
            await index.add(_book(2, owner="pete@x"))
            await index.add(_book(1, owner="jane@y"))
            removed = await index.purge_owner("pete@x")
            return removed, await index.list()

        removed, remaining = asyncio.run(scenario())

        assert removed == 2
        assert [b.owner_id for b in remaining] == ["jane@y"]

    def test_purge_unknown_owner_is_noop(self, registry):
        assert asyncio.run(registry.catalog_index().purge_owner("ghost@x")) == 0

    def test_purge_requires_owner(self, registry):
        with pytest.raises(InvalidArgument, match="Missing email"):
            asyncio.run(registry.catalog_index().purge_owner(""))
