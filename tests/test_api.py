import pytest
from fastapi.testclient import TestClient

from business_directory_api.app.core.config import Settings
from business_directory_api.app.main import create_app

API = "/api/v1"

LISTING = {
    "name": "Tacos Gera",
    "description": "Ricos tacos de bistec",
    "category": "food",
    "location": {"latitude": 25.676694, "longitude": -100.2613924},
    "address": "C. Guadalupe 227A, Guadalupe",
    "phone": "81 1723 5569",
}


def register(client, email="a@b.com", password="secret1", full_name="Ann"):
    return client.post(
        f"{API}/auth/register",
        json={"email": email, "password": password, "full_name": full_name},
    )


def create_listing(client, **overrides):
    response = client.post(f"{API}/businesses/", json={**LISTING, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


class TestAuth:
    def test_register_and_session(self, client):
        response = register(client)
        assert response.status_code == 201
        body = response.json()
        assert body["is_authenticated"] is True
        assert body["user"]["email"] == "a@b.com"
        assert "password" not in body["user"]

        assert client.get(f"{API}/auth/session").json()["user"]["name"] == "Ann"

    def test_logout(self, client):
        register(client)
        body = client.post(f"{API}/auth/logout").json()
        assert body == {"is_authenticated": False, "user": None}

    def test_login(self, client):
        register(client)
        client.post(f"{API}/auth/logout")
        response = client.post(f"{API}/auth/login", json={"email": "a@b.com", "password": "secret1"})
        assert response.status_code == 200
        assert response.json()["is_authenticated"] is True

    def test_wrong_password_is_localized(self, client):
        register(client)
        client.post(f"{API}/auth/logout")
        response = client.post(
            f"{API}/auth/login",
            json={"email": "a@b.com", "password": "nope"},
            headers={"Accept-Language": "es-MX"},
        )
        assert response.status_code == 401
        assert response.json()["detail"] == "Correo electrónico o contraseña incorrectos"

    def test_duplicate_registration(self, client):
        register(client)
        response = register(client, full_name="Other")
        assert response.status_code == 409
        assert response.json()["detail"] == "This email is already registered"

    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "not-an-email", "password": "secret1", "full_name": "Ann"},
            {"email": "a@b.com", "password": "short", "full_name": "Ann"},
            {"email": "a@b.com", "password": "secret1", "full_name": "  "},
            {"email": "a@b.com", "password": "secret1", "full_name": "Ann", "confirm_password": "secret2"},
        ],
    )
    def test_invalid_registration(self, client, payload):
        assert client.post(f"{API}/auth/register", json=payload).status_code == 422


class TestBusinesses:
    def test_create_requires_login(self, client):
        response = client.post(f"{API}/businesses/", json=LISTING)
        assert response.status_code == 401
        assert response.json()["detail"] == "You need to log in first"

    def test_create_gets_default_image_and_owner(self, client):
        user = register(client).json()["user"]
        created = create_listing(client)

        assert created["images"] == ["comidas2"]
        assert created["owner_id"] == user["id"]
        assert created["rating"] == 0
        assert client.get(f"{API}/businesses/{created['id']}").json()["name"] == "Tacos Gera"

    @pytest.mark.parametrize("field", ["name", "description", "phone"])
    def test_blank_required_field_is_rejected(self, client, field):
        register(client)
        response = client.post(f"{API}/businesses/", json={**LISTING, field: "   "})
        assert response.status_code == 422

    def test_unknown_id(self, client):
        assert client.get(f"{API}/businesses/missing").status_code == 404

    def test_search_and_category(self, client):
        register(client)
        create_listing(client, name="Oxxo", description="Tienda", category="retail")
        create_listing(client)

        names = [b["name"] for b in client.get(f"{API}/businesses/", params={"search": "TACOS"}).json()]
        assert names == ["Tacos Gera"]
        names = [b["name"] for b in client.get(f"{API}/businesses/", params={"category": "retail"}).json()]
        assert names == ["Oxxo"]

    def test_nearest_with_location(self, client):
        register(client)
        create_listing(client, name="Far", location={"latitude": 25.7, "longitude": -100.2})
        create_listing(client, name="Near", location={"latitude": 25.6695, "longitude": -100.3098})

        response = client.get(
            f"{API}/businesses/",
            params={"sort": "nearest", "latitude": 25.6694, "longitude": -100.3097},
        )
        body = response.json()
        assert [b["name"] for b in body] == ["Near", "Far"]
        assert body[0]["distance"] < body[1]["distance"]

    def test_location_needs_both_coordinates(self, client):
        assert client.get(f"{API}/businesses/", params={"latitude": 25.6}).status_code == 400

    def test_mine(self, client):
        register(client)
        create_listing(client, name="Mine")
        client.post(f"{API}/auth/logout")
        register(client, email="other@b.com")
        create_listing(client, name="Theirs")

        names = [b["name"] for b in client.get(f"{API}/businesses/mine").json()]
        assert names == ["Theirs"]

    def test_owner_can_replace_and_delete(self, client):
        register(client)
        created = create_listing(client)

        response = client.put(
            f"{API}/businesses/{created['id']}",
            json={**LISTING, "name": "Tacos Gera II", "images": ["tacos2"]},
        )
        assert response.status_code == 200
        updated = response.json()
        assert updated["name"] == "Tacos Gera II"
        assert updated["images"] == ["tacos2"]
        assert updated["created_at"] == created["created_at"]

        assert client.delete(f"{API}/businesses/{created['id']}").status_code == 204
        assert client.get(f"{API}/businesses/{created['id']}").status_code == 404

    def test_other_users_cannot_modify(self, client):
        register(client)
        created = create_listing(client)
        client.post(f"{API}/auth/logout")
        register(client, email="other@b.com")

        assert client.put(f"{API}/businesses/{created['id']}", json=LISTING).status_code == 403
        assert client.delete(f"{API}/businesses/{created['id']}").status_code == 403

    def test_seed_endpoint(self, client):
        register(client)
        assert client.post(f"{API}/businesses/seed").json() == {"inserted": 25}
        assert client.post(f"{API}/businesses/seed").json() == {"inserted": 0}
        assert client.post(f"{API}/businesses/seed", params={"force": True}).json() == {"inserted": 25}
        assert len(client.get(f"{API}/businesses/").json()) == 25

    def test_seed_keeps_other_users_listings(self, client):
        register(client)
        created = create_listing(client)
        client.post(f"{API}/auth/logout")
        register(client, email="other@b.com")

        assert client.post(f"{API}/businesses/seed").json() == {"inserted": 25}
        assert client.post(f"{API}/businesses/seed", params={"force": True}).json() == {"inserted": 25}

        response = client.get(f"{API}/businesses/{created['id']}")
        assert response.status_code == 200
        assert response.json()["name"] == "Tacos Gera"
        assert len(client.get(f"{API}/businesses/").json()) == 26


def test_seed_on_startup(tmp_path):
    app = create_app(Settings(database_url=str(tmp_path / "seeded.db"), seed_sample_data=True))
    with TestClient(app) as client:
        assert len(client.get(f"{API}/businesses/").json()) == 25


def test_categories_are_localized(client):
    english = client.get(f"{API}/categories/").json()
    assert [c["value"] for c in english] == ["food", "retail", "services", "entertainment", "other"]
    assert english[0] == {
        "value": "food",
        "name": "Food & Drinks",
        "icon": "fork.knife",
        "default_image": "comidas2",
    }

    spanish = client.get(f"{API}/categories/", headers={"Accept-Language": "es"}).json()
    assert spanish[1]["name"] == "Comercio"


def test_translations(client):
    body = client.get(f"{API}/i18n/", headers={"Accept-Language": "es"}).json()
    assert body["language"] == "es"
    assert body["strings"]["login_button"] == "INICIAR SESIÓN"
    assert client.get(f"{API}/i18n/").json()["language"] == "en"
