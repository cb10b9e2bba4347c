import pytest

from business_directory_api.app.core.errors import StoreError
from business_directory_api.app.schemas.business import BusinessCategory
from business_directory_api.app.services.entity_store import EntityStore

from .conftest import make_business


def test_create_and_fetch_user_normalizes_email(store):
    created = store.create_user("Ana@Example.COM", "secret1", "Ana")
    assert created is not None
    assert created.email == "ana@example.com"
    assert created.id

    fetched = store.fetch_user("ANA@example.com")
    assert fetched is not None
    assert fetched.id == created.id
    assert fetched.password == "secret1"
    assert fetched.name == "Ana"


def test_fetch_unknown_user_returns_none(store):
    assert store.fetch_user("nobody@example.com") is None


def test_create_user_with_taken_email_returns_none(store):
    assert store.create_user("ana@example.com", "secret1", "Ana") is not None
    assert store.create_user("ANA@example.com", "other12", "Other") is None
    assert store.fetch_user("ana@example.com").name == "Ana"


def test_delete_user(store):
    user = store.create_user("ana@example.com", "secret1", "Ana")
    assert store.delete_user(user)
    assert store.fetch_user("ana@example.com") is None
    assert not store.delete_user(user)


def test_business_round_trip(store):
    business = make_business(
        email="hola@tacos.mx",
        website="www.tacos.mx",
        social_media={"instagram": "@tacosgera", "facebook": "Tacos Gera"},
        images=["tacos1", "tacos2"],
    )
    store.add_business(business)

    [fetched] = store.fetch_businesses()
    assert fetched == business
    assert fetched.distance is None


def test_fetch_businesses_keeps_insertion_order(store):
    for business_id in ("b", "c", "a"):
        store.add_business(make_business(id=business_id))
    assert [b.id for b in store.fetch_businesses()] == ["b", "c", "a"]


def test_unknown_category_reads_as_other(store):
    store.add_business(make_business(id="x"))
    store.connection.execute("UPDATE businesses SET category = 'bakery' WHERE id = 'x'")
    store.save()
    assert store.fetch_business("x").category == BusinessCategory.other


def test_add_existing_id_raises_store_error(store):
    store.add_business(make_business(id="dup"))
    with pytest.raises(StoreError):
        store.add_business(make_business(id="dup", name="Otro"))
    assert [b.name for b in store.fetch_businesses()] == ["Tacos Gera"]


def test_upsert_replaces_in_place(store):
    store.add_business(make_business(id="1", name="Old"))
    store.add_business(make_business(id="2"))
    store.upsert_business(make_business(id="1", name="New", images=["new1"]))

    businesses = store.fetch_businesses()
    assert [b.id for b in businesses] == ["1", "2"]
    assert businesses[0].name == "New"
    assert businesses[0].images == ["new1"]


def test_upsert_inserts_missing(store):
    store.upsert_business(make_business(id="fresh"))
    assert store.fetch_business("fresh") is not None


def test_delete_business_by_record_or_id(store):
    first = make_business(id="1")
    store.add_business(first)
    store.add_business(make_business(id="2"))

    assert store.delete_business(first)
    assert store.delete_business("2")
    assert not store.delete_business("2")
    assert store.fetch_businesses() == []


def test_delete_all_businesses(store):
    for business_id in ("1", "2", "3"):
        store.add_business(make_business(id=business_id))
    assert store.delete_all_businesses() == 3
    assert store.fetch_businesses() == []


def test_listeners_are_notified_after_writes(store):
    calls = []
    store.subscribe(lambda: calls.append(len(store.fetch_businesses())))

    store.add_business(make_business(id="1"))
    store.upsert_business(make_business(id="1", name="Renamed"))
    store.delete_business("1")

    # Each listener call already sees the committed state.
    assert calls == [1, 1, 0]


def test_save_without_pending_changes_does_not_notify(store):
    calls = []
    store.subscribe(lambda: calls.append(True))
    store.save()
    assert calls == []


def test_unsubscribe(store):
    calls = []

    def listener():
        calls.append(True)

    store.subscribe(listener)
    store.unsubscribe(listener)
    store.add_business(make_business())
    assert calls == []


def test_failing_listener_does_not_undo_write(store):
    def broken():
        raise RuntimeError("boom")

    store.subscribe(broken)
    store.add_business(make_business(id="kept"))
    assert store.fetch_business("kept") is not None


def test_flags(store):
    assert store.get_flag("has_loaded_initial_data") is None
    store.set_flag("has_loaded_initial_data", "1")
    store.set_flag("has_loaded_initial_data", "2")
    assert store.get_flag("has_loaded_initial_data") == "2"


def test_data_survives_reopening(tmp_path):
    path = str(tmp_path / "persist.db")
    first = EntityStore(path)
    first.create_user("ana@example.com", "secret1", "Ana")
    first.add_business(make_business(id="1"))
    first.close()

    second = EntityStore(path)
    assert second.fetch_user("ana@example.com") is not None
    assert [b.id for b in second.fetch_businesses()] == ["1"]
    second.close()


def test_in_memory_database():
    memory_store = EntityStore(":memory:")
    memory_store.add_business(make_business(id="1"))
    assert len(memory_store.fetch_businesses()) == 1
    memory_store.close()


def test_closed_connection_raises_store_error(store):
    store.connection.close()
    with pytest.raises(StoreError):
        store.fetch_businesses()
