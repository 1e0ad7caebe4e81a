from fastapi.testclient import TestClient
from sqlalchemy import select

from eshop.data.models.user import UserModel
from eshop.services.user_service import UserService
from eshop.utils.passwords import pwd_context


class TestUserRegistry:
    def test_create_and_get(self, test_client: TestClient):
        created = test_client.post(
            "/users", json={"email": "Jan@Example.com", "password": "correct horse"}
        )

        assert created.status_code == 201
        user = created.json()
        assert user == {"id": user["id"], "email": "jan@example.com"}
        assert "password" not in created.text

        fetched = test_client.get(f"/users/{user['id']}")
        assert fetched.status_code == 200
        assert fetched.json() == user

    def test_duplicate_email(self, test_client: TestClient, api_user):
        response = test_client.post(
            "/users", json={"email": api_user["email"], "password": "whatever-123"}
        )

        assert response.status_code == 400
        assert response.json()["errors"] == [
            {"field": "email", "message": "Email is already registered."}
        ]

    def test_invalid_email_and_short_password(self, test_client: TestClient):
        response = test_client.post("/users", json={"email": "nope", "password": "short"})

        assert response.status_code == 400
        assert [e["field"] for e in response.json()["errors"]] == ["email", "password"]

    def test_unknown_user(self, test_client: TestClient):
        response = test_client.get("/users/31")

        assert response.status_code == 404
        assert response.json()["detail"] == "User with ID 31 not found."

    def test_non_positive_id(self, test_client: TestClient):
        response = test_client.get("/users/0")

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "id"


def test_password_is_stored_hashed(db):
    UserService(db).create_user("ola@example.com", "plain-text-pass")

    stored = db.execute(select(UserModel)).scalar_one()
    assert stored.password_hash != "plain-text-pass"
    assert pwd_context.identify(stored.password_hash) == "pbkdf2_sha256"
    assert pwd_context.verify("plain-text-pass", stored.password_hash)
    assert not pwd_context.verify("wrong-pass", stored.password_hash)


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
