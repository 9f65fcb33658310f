"""Tests for the in-memory customers slice."""
import pytest
from faker import Faker

from app.crm import create_app
from app.crm.errors import BadRequestError, NotFoundError
from app.crm.modules.memory_customers.service import InMemoryCustomerService, seed_customers


@pytest.fixture()
def app(tmp_path, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{tmp_path/'test.db'}")
    monkeypatch.setenv("ENV", "test")
    for k in ("SEED_COUNT", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(k, raising=False)
    return create_app()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def service():
    return InMemoryCustomerService()


def test_create_then_find_one(service):
    created = service.create({"name": "John Doe", "email": "john.doe@example.com"})
    assert created.id == 1
    assert service.find_one(created.id) == created
    assert service.find_one(str(created.id)) is created


def test_find_all_empty_is_not_an_error(service):
    assert service.find_all() == []


def test_create_rejects_extra_fields(service):
    with pytest.raises(BadRequestError) as exc:
        service.create({"name": "J", "email": "j@example.com", "age": 3})
    assert exc.value.message == "Invalid fields: age"
    assert service.find_all() == []
    assert service.counter == 1


def test_create_requires_name_and_email(service):
    with pytest.raises(BadRequestError, match="Invalid customer data."):
        service.create({"name": "J"})


def test_update_changes_only_given_fields(service):
    created = service.create({"name": "John Doe", "email": "john.doe@example.com"})
    updated = service.update(created.id, {"name": "Jane Doe"})
    assert updated is created
    assert updated.to_dict() == {"id": 1, "name": "Jane Doe", "email": "john.doe@example.com"}


def test_update_missing_customer(service):
    other = service.create({"name": "John Doe", "email": "john.doe@example.com"})
    with pytest.raises(NotFoundError, match="Customer with ID 99 not found."):
        service.update(99, {"name": "X"})
    assert other.name == "John Doe"


def test_update_invalid_value_does_not_mutate(service):
    created = service.create({"name": "John Doe", "email": "john.doe@example.com"})
    with pytest.raises(BadRequestError):
        service.update(created.id, {"name": "Jane", "email": "broken"})
    assert created.name == "John Doe"


def test_seed_customers_uses_create_path(service):
    Faker.seed(1234)
    seeded = seed_customers(service, 3, fake=Faker())
    assert [c.id for c in seeded] == [1, 2, 3]
    assert all(c.name and "@" in c.email for c in seeded)
    assert service.counter == 4


def test_boot_seeds_ten_customers(client):
    r = client.get("/all")
    assert r.status_code == 200
    assert [c["id"] for c in r.json] == list(range(1, 11))

    r = client.post("/create", json={"name": "John Doe", "email": "john.doe@example.com"})
    assert r.status_code == 201
    assert r.json == {"id": 11, "name": "John Doe", "email": "john.doe@example.com"}


def test_info_and_update_scenario(client):
    r = client.post("/create", json={"name": "John Doe", "email": "john.doe@example.com"})
    cid = r.json["id"]

    r = client.put(f"/update/{cid}", json={"name": "Jane Doe"})
    assert r.status_code == 200
    assert r.json == {"id": cid, "name": "Jane Doe", "email": "john.doe@example.com"}

    r = client.get(f"/info/{cid}")
    assert r.status_code == 200
    assert r.json["name"] == "Jane Doe"


def test_http_errors(client):
    r = client.get("/info/999")
    assert r.status_code == 404
    assert r.json == {"error": "Customer with ID 999 not found."}

    r = client.get("/info/abc")
    assert r.status_code == 404

    r = client.post("/create", json={"name": "J", "email": "j@example.com", "role": "admin"})
    assert r.status_code == 400
    assert r.json == {"error": "Invalid fields: role"}

    r = client.post("/create", data="not json", content_type="text/plain")
    assert r.status_code == 400

    r = client.put("/update/999", json={"name": "X"})
    assert r.status_code == 404


def test_no_remove_route(client):
    r = client.delete("/remove/1")
    assert r.status_code == 404
    assert len(client.get("/all").json) == 10


def test_each_app_owns_its_store(app):
    client = app.test_client()
    client.post("/create", json={"name": "John Doe", "email": "john.doe@example.com"})
    other = create_app()
    assert len(other.test_client().get("/all").json) == 10
    assert len(client.get("/all").json) == 11


def test_underscored_id_is_not_found(client):
    r = client.get("/info/1_0")
    assert r.status_code == 404
    assert r.json == {"error": "Customer with ID 1_0 not found."}


def test_remove_is_not_supported(service):
    created = service.create({"name": "John Doe", "email": "john.doe@example.com"})
    with pytest.raises(NotImplementedError):
        service.remove(created.id)
    assert service.find_all() == [created]
