import pytest
from supabase import AuthApiError, PostgrestAPIError

from backend import Backend, ProductNotFound
from fakes import FakeClient, FakeState


@pytest.fixture
def state():
    return FakeState(users={"admin@example.com": "secret"})


@pytest.fixture
def backend(state):
    return Backend(FakeClient(state))


def test_pages_are_disjoint_and_contiguous(state, backend):
    rows = [state.add_product(name=f"P{i}") for i in range(20)]
    newest_first = [row["id"] for row in reversed(rows)]

    page1 = backend.list_products(page=1, limit=8)
    page2 = backend.list_products(page=2, limit=8)
    page3 = backend.list_products(page=3, limit=8)

    ids = [p.id for p in page1 + page2 + page3]
    assert ids == newest_first
    assert not {p.id for p in page1} & {p.id for p in page2}
    assert len(page1) == len(page2) == 8
    assert len(page3) == 4


def test_list_filters_by_category(state, backend):
    state.add_product(category="abaya")
    bag = state.add_product(category="handbag")

    products = backend.list_products(category="handbag")
    assert [p.id for p in products] == [bag["id"]]


def test_list_requests_expected_range(state, backend):
    backend.list_products(page=3, limit=8)
    action, _, _, bounds = state.calls[-1]
    assert action == "select"
    assert bounds == (16, 23)


def test_categories_come_from_data(state, backend):
    state.add_product(category="abaya")
    state.add_product(category="tshirt")
    state.add_product(category="abaya")
    assert backend.list_categories() == ["abaya", "tshirt"]


def test_create_returns_populated_row(backend):
    product = backend.create_product({
        "name": "Robe",
        "description": "Belle robe",
        "price": 15000,
        "image_url": "https://img/x.jpg",
        "category": "abaya",
    })
    assert product.id
    assert product.created_at is not None
    assert product.updated_at is None
    assert product.price == 15000


def test_update_stamps_updated_at(state, backend):
    row = state.add_product()
    product = backend.update_product(row["id"], {"price": 20000})
    assert product.price == 20000
    assert product.updated_at is not None
    _, payload, filters, _ = state.calls[-1]
    assert "updated_at" in payload
    assert filters == [("id", row["id"])]


def test_update_unknown_id_raises_not_found(backend):
    with pytest.raises(ProductNotFound):
        backend.update_product("missing", {"name": "x"})


def test_delete(state, backend):
    row = state.add_product()
    assert backend.delete_product(row["id"]) is None
    assert state.rows == []


def test_delete_unknown_id_raises_not_found(backend):
    with pytest.raises(ProductNotFound):
        backend.delete_product("missing")


def test_backend_errors_propagate_unchanged(state, backend):
    error = PostgrestAPIError({"message": "boom", "code": "500"})
    state.fail_next = error
    with pytest.raises(PostgrestAPIError) as exc:
        backend.list_products()
    assert exc.value is error


def test_upload_keeps_extension_and_randomizes_name(state, backend):
    url1 = backend.upload_product_image("photo.JPG", b"data", "image/jpeg")
    url2 = backend.upload_product_image("photo.JPG", b"data", "image/jpeg")

    assert url1 != url2
    assert url1.startswith("https://fake.supabase.co/storage/v1/object/public/products/products/")
    assert url1.endswith(".jpg")
    assert len(state.files) == 2
    _, path, options, _ = state.calls[-1]
    assert path.startswith("products/")
    assert options == {"content-type": "image/jpeg"}


def test_upload_without_extension(state, backend):
    url = backend.upload_product_image("photo", b"data")
    name = url.rsplit("/", 1)[1]
    assert "." not in name


def test_sign_in_returns_session(backend):
    session = backend.sign_in("admin@example.com", "secret")
    assert session.access_token


def test_sign_in_propagates_invalid_credentials(backend):
    with pytest.raises(AuthApiError):
        backend.sign_in("admin@example.com", "wrong")
