import asyncio

from services.registry import CATALOG_INDEX_NAME, StoreRegistry, id_from_name


def test_id_from_name_is_deterministic():
    assert id_from_name("pete@x") == id_from_name("pete@x")
    assert id_from_name("pete@x") != id_from_name("jane@y")


def test_same_owner_reaches_same_store(registry):
    first = registry.record_store("pete@x")
    second = registry.record_store("pete@x")

    assert first is second
    assert first.key == id_from_name("pete@x")
    assert first.owner_id == "pete@x"


def test_different_owners_get_different_stores(registry):
    assert registry.record_store("pete@x") is not registry.record_store("jane@y")


def test_catalog_index_is_a_singleton(registry):
    index = registry.catalog_index()

    assert index is registry.catalog_index()
    assert index.key == id_from_name(CATALOG_INDEX_NAME)
    assert registry.record_store("pete@x")._index is index


def test_registries_share_state_through_the_database(session_factory):
    first = StoreRegistry(session_factory)
    second = StoreRegistry(session_factory)

    asyncio.run(first.record_store("pete@x").add("Dune", "Frank Herbert"))
    books = asyncio.run(second.record_store("pete@x").list())

    assert [b.name for b in books] == ["Dune"]
    assert [b.name for b in asyncio.run(second.catalog_index().list())] == ["Dune"]
