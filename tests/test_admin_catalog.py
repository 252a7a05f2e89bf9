import json

import pytest

from autoparts.database.local_storage import LocalStorage
from autoparts.storefront.admin_catalog import AdminProductStore
from autoparts.storefront.catalog import DEFAULT_IMAGE, SEED_PRODUCTS
from autoparts.storefront.errors import AccessDeniedError, NotFoundError, PersistenceError, ValidationError
from autoparts.storefront.models import Category, Product
from autoparts.storefront.session import SessionManager
from autoparts.utils.id_generator import IdGenerator


def _stored(storage):
    return [Product.from_dict(item) for item in json.loads(storage.get("products"))]


def _form(**overrides):
    form = {"name": "Ремень ГРМ", "brand": "Gates", "price": 1900, "category": "engine"}
    form.update(overrides)
    return form


def test_fresh_store_seeds_six_products_in_order(admin_store, storage):
    assert storage.get("products") is None

    products = admin_store.load()

    assert products == list(SEED_PRODUCTS)
    assert [p.id for p in products] == [1, 2, 3, 4, 5, 6]
    assert _stored(storage) == list(SEED_PRODUCTS)


def test_load_reads_existing_products(admin_store, storage):
    only = SEED_PRODUCTS[1]
    storage.set_json("products", [only.to_dict()])
    assert admin_store.load() == [only]


def test_load_rejects_malformed_list(admin_store, storage):
    storage.set_json("products", {"id": 1})
    with pytest.raises(PersistenceError):
        admin_store.load()

    storage.set_json("products", [{"id": 1, "name": "x"}])
    with pytest.raises(PersistenceError):
        admin_store.load()


def test_create_with_zero_price_is_rejected(admin_store, storage):
    admin_store.load()
    before = storage.get("products")

    with pytest.raises(ValidationError) as exc:
        admin_store.create(_form(price=0))

    assert "price" in exc.value.field_errors
    assert exc.value.message == "Заполните все обязательные поля"
    assert storage.get("products") == before


@pytest.mark.parametrize("missing", ["name", "brand"])
def test_create_requires_name_and_brand(admin_store, storage, missing):
    admin_store.load()
    with pytest.raises(ValidationError) as exc:
        admin_store.create(_form(**{missing: "  "}))
    assert missing in exc.value.field_errors
    assert len(_stored(storage)) == 6


def test_create_with_price_one_appends_exactly_one(admin_store, storage):
    admin_store.load()

    product = admin_store.create(_form(price=1))

    stored = _stored(storage)
    assert len(stored) == 7
    assert stored[-1] == product
    assert product.price == 1
    assert product.discount == 0
    assert product.id not in {p.id for p in SEED_PRODUCTS}


def test_create_applies_form_defaults(admin_store):
    product = admin_store.create({"name": "Колодки", "brand": "TRW", "price": "2100"})
    assert product.category == Category.BRAKES
    assert product.image == DEFAULT_IMAGE
    assert product.stock is True
    assert product.price == 2100


def test_create_rejects_bad_discount_and_category(admin_store):
    with pytest.raises(ValidationError) as exc:
        admin_store.create(_form(discount=150, category="wheels"))
    assert set(exc.value.field_errors) == {"discount", "category"}


def test_rapid_creates_get_distinct_ids(storage, admin_session):
    store = AdminProductStore(storage, admin_session, id_generator=IdGenerator(clock=lambda: 0.0))
    a = store.create(_form())
    b = store.create(_form())
    assert a.id == 7
    assert b.id == 8


def test_update_merges_fields(admin_store, storage):
    admin_store.load()

    updated = admin_store.update(2, {"price": 500, "discount": 10, "id": 999})

    assert updated.id == 2
    assert updated.price == 500
    assert updated.discount == 10
    assert updated.name == "Масляный фильтр"
    assert _stored(storage)[1] == updated
    assert [p.id for p in _stored(storage)] == [1, 2, 3, 4, 5, 6]


def test_update_validates_like_create(admin_store, storage):
    admin_store.load()
    before = storage.get("products")
    with pytest.raises(ValidationError):
        admin_store.update(2, {"price": 0})
    assert storage.get("products") == before


def test_update_missing_product_is_noop(admin_store, storage):
    admin_store.load()
    before = storage.get("products")
    assert admin_store.update(404, _form()) is None
    assert storage.get("products") == before


def test_delete(admin_store, storage):
    admin_store.load()
    assert admin_store.delete(3) is True
    assert [p.id for p in _stored(storage)] == [1, 2, 4, 5, 6]
    assert admin_store.delete(3) is False
    assert [p.id for p in _stored(storage)] == [1, 2, 4, 5, 6]


def test_get(admin_store):
    assert admin_store.get(5).name == "Тормозные диски"
    with pytest.raises(NotFoundError):
        admin_store.get(77)


def test_changes_survive_a_new_store_instance(admin_store, storage, admin_session):
    created = admin_store.create(_form())
    reopened = AdminProductStore(storage, admin_session)
    assert reopened.load()[-1] == created


@pytest.mark.asyncio
async def test_non_admin_access_is_denied(storage, config):
    session = SessionManager(storage, auth=config.auth)
    store = AdminProductStore(storage, session)

    with pytest.raises(AccessDeniedError):
        store.load()

    await session.login("x@y.com", "pw")
    with pytest.raises(AccessDeniedError):
        store.create(_form())
    with pytest.raises(AccessDeniedError):
        store.delete(1)
    assert storage.get("products") is None


def test_failed_write_keeps_previous_state(admin_session):
    class BrokenWrites(LocalStorage):
        def set(self, key, value):
            raise PersistenceError("quota exceeded", key=key)

    broken = BrokenWrites({"products": json.dumps([p.to_dict() for p in SEED_PRODUCTS])})
    store = AdminProductStore(broken, admin_session)
    store.load()

    with pytest.raises(PersistenceError):
        store.create(_form())
    with pytest.raises(PersistenceError):
        store.delete(1)
    assert store.products == list(SEED_PRODUCTS)


def test_reads_are_denied_after_logout(admin_store, admin_session):
    admin_store.load()
    admin_session.logout()

    with pytest.raises(AccessDeniedError):
        admin_store.get(1)
    with pytest.raises(AccessDeniedError):
        admin_store.products


@pytest.mark.parametrize("raw, expected", [("false", False), ("0", False), ("off", False), ("yes", True), (False, False)])
def test_stock_form_values_are_parsed(admin_store, raw, expected):
    product = admin_store.create(_form(stock=raw))
    assert product.stock is expected


def test_unrecognized_stock_value_is_rejected(admin_store, storage):
    admin_store.load()
    before = storage.get("products")
    with pytest.raises(ValidationError) as exc:
        admin_store.create(_form(stock="maybe"))
    assert set(exc.value.field_errors) == {"stock"}
    assert storage.get("products") == before
