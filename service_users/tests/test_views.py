from datetime import UTC, datetime, timedelta
from unittest import mock
from uuid import uuid4

import pytest

from api_users.database import UserStore
from api_users.utils import AuthGate, Tokenizer
from api_users.utils.custom_exception import StoreTimeoutError

from .helpers import PASSWORD, bearer

pytestmark = pytest.mark.django_db

SIGNUP_BODY = {
    "firstName": "Alice",
    "lastName": "Liddell",
    "username": "alice",
    "password": PASSWORD,
}


class TestSignUp:
    def test_signup_then_signin(self, api_client, store):
        response = api_client.post("/signup", SIGNUP_BODY, format="json")
        assert response.status_code == 201
        body = response.json()
        assert body["message"]
        assert body["user"]["username"] == "alice"
        assert body["user"]["role"] == "user"
        assert "password" not in body["user"]
        assert "password_hash" not in body["user"]

        response = api_client.post(
            "/signin",
            {"username": "alice", "password": PASSWORD},
            format="json",
        )
        assert response.status_code == 200
        tokens = response.json()
        assert set(tokens) == {
            "token",
            "tokenExpireAt",
            "refresh",
            "refreshExpireAt",
        }

        stored = store.get_by_username("alice")
        assert Tokenizer.parse_subject(tokens["token"]) == str(stored.id)
        assert Tokenizer.parse_subject(tokens["refresh"]) == str(stored.id)
        assert stored.password_hash != PASSWORD

    def test_duplicate_username(self, api_client, user):
        response = api_client.post("/signup", SIGNUP_BODY, format="json")
        assert response.status_code == 400
        assert set(response.json()) == {"error", "message"}

    def test_missing_fields(self, api_client):
        response = api_client.post(
            "/signup",
            {"username": "alice"},
            format="json",
        )
        assert response.status_code == 400
        body = response.json()
        assert "password" in body["error"]
        assert body["message"]

    def test_invalid_json(self, api_client):
        response = api_client.post(
            "/signup",
            "{not json",
            content_type="application/json",
        )
        assert response.status_code == 400
        assert set(response.json()) == {"error", "message"}

    def test_hashing_failure_returns_error(self, api_client, store):
        with mock.patch(
            "api_users.utils.hasher.make_password",
            side_effect=OSError("entropy source failed"),
        ):
            response = api_client.post("/signup", SIGNUP_BODY, format="json")

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert store.get_by_username("alice") is None


class TestSignIn:
    def test_wrong_password_is_generic(self, api_client, user):
        response = api_client.post(
            "/signin",
            {"username": "alice", "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid login or password"}

    def test_unknown_user_is_same_error(self, api_client, user):
        wrong_password = api_client.post(
            "/signin",
            {"username": "alice", "password": "wrong"},
            format="json",
        )
        unknown_user = api_client.post(
            "/signin",
            {"username": "nobody", "password": PASSWORD},
            format="json",
        )
        assert unknown_user.status_code == wrong_password.status_code
        assert unknown_user.json() == wrong_password.json()

    def test_store_timeout(self, api_client):
        with mock.patch.object(
            UserStore,
            "get_by_username",
            side_effect=StoreTimeoutError(),
        ):
            response = api_client.post(
                "/signin",
                {"username": "alice", "password": PASSWORD},
                format="json",
            )

        assert response.status_code == 503
        assert "error" in response.json()


class TestProfile:
    def test_profile(self, api_client, user):
        response = api_client.get(
            "/profile",
            HTTP_AUTHORIZATION=bearer(user),
        )
        assert response.status_code == 200
        profile = response.json()["profile"]
        assert profile["id"] == str(user.id)
        assert profile["firstName"] == "Alice"
        assert "password_hash" not in profile

    def test_expired_token_is_auth_failure(self, api_client, user):
        token = Tokenizer.gen_token(
            sub=user.id,
            ttl=timedelta(hours=1),
            now_=datetime.now(UTC) - timedelta(hours=2),
        )
        response = api_client.get("/profile", HTTP_AUTHORIZATION=bearer(token))
        assert response.status_code == 401
        assert response.json() == {
            "error": "Invalid token, please login again",
        }

    @pytest.mark.parametrize(
        "header_value",
        ["", "abc123", "Basic abc123", "Bearer a b"],
    )
    def test_malformed_header(self, api_client, header_value):
        response = api_client.get("/profile", HTTP_AUTHORIZATION=header_value)
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid authorization header"}

    def test_missing_header(self, api_client):
        response = api_client.get("/profile")
        assert response.status_code == 401

    def test_deleted_user_is_not_found(self, api_client, store, user):
        header_value = bearer(user)
        store.delete(user.id)

        response = api_client.get("/profile", HTTP_AUTHORIZATION=header_value)
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestRefresh:
    @pytest.mark.parametrize(
        ("method", "path"),
        [("get", "/profile"), ("post", "/refresh")],
    )
    def test_token_parsed_once_per_request(
        self,
        api_client,
        user,
        method,
        path,
    ):
        header_value = bearer(user)
        with mock.patch.object(
            AuthGate,
            "authenticate",
            wraps=AuthGate.authenticate,
        ) as authenticate:
            response = getattr(api_client, method)(
                path,
                HTTP_AUTHORIZATION=header_value,
            )

        assert response.status_code == 200
        authenticate.assert_called_once_with(header_value)

    def test_refresh(self, api_client, user):
        response = api_client.post("/refresh", HTTP_AUTHORIZATION=bearer(user))
        assert response.status_code == 200
        body = response.json()
        assert Tokenizer.parse_subject(body["token"]) == str(user.id)
        assert Tokenizer.parse_subject(body["refresh"]) == str(user.id)

    def test_refresh_with_malformed_header(self, api_client):
        response = api_client.post("/refresh", HTTP_AUTHORIZATION="abc123")
        assert response.status_code == 401

    def test_refresh_for_unknown_user(self, api_client):
        token = Tokenizer.gen_token(sub=uuid4(), ttl=timedelta(hours=1))
        response = api_client.post("/refresh", HTTP_AUTHORIZATION=bearer(token))
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestUsers:
    def test_list_requires_token(self, api_client, user):
        assert api_client.get("/users").status_code == 401

    def test_list(self, api_client, make_user):
        alice = make_user(username="alice")
        make_user(username="bob")

        response = api_client.get("/users", HTTP_AUTHORIZATION=bearer(alice))
        assert response.status_code == 200
        users = response.json()["users"]
        assert [u["username"] for u in users] == ["alice", "bob"]
        assert all("password_hash" not in u for u in users)

    def test_get_user(self, api_client, user):
        response = api_client.get(f"/users/{user.id}")
        assert response.status_code == 200
        assert response.json()["user"]["username"] == "alice"

    @pytest.mark.parametrize("user_id", [str(uuid4()), "not-a-uuid"])
    def test_get_unknown_user(self, api_client, user_id):
        response = api_client.get(f"/users/{user_id}")
        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}

    def test_unexpected_error_is_500(self, api_client, user):
        with mock.patch.object(
            UserStore,
            "list_all",
            side_effect=RuntimeError("unexpected"),
        ):
            response = api_client.get("/users", HTTP_AUTHORIZATION=bearer(user))

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}


class TestUpdateUser:
    def test_update_self(self, api_client, store, user):
        response = api_client.put(
            f"/users/{user.id}",
            {"firstName": "Alicia", "role": "admin"},
            format="json",
            HTTP_AUTHORIZATION=bearer(user),
        )
        assert response.status_code == 200
        assert response.json()["message"]

        updated = store.get_by_id(user.id)
        assert updated.first_name == "Alicia"
        assert updated.role == "user"

    def test_update_other_forbidden(self, api_client, store, make_user):
        alice = make_user(username="alice")
        bob = make_user(username="bob")

        response = api_client.put(
            f"/users/{bob.id}",
            {"firstName": "Robert"},
            format="json",
            HTTP_AUTHORIZATION=bearer(alice),
        )
        assert response.status_code == 403
        assert store.get_by_id(bob.id).first_name == "Alice"

    def test_update_requires_token(self, api_client, user):
        response = api_client.put(
            f"/users/{user.id}",
            {"firstName": "Alicia"},
            format="json",
        )
        assert response.status_code == 401

    def test_update_to_taken_username(self, api_client, make_user):
        alice = make_user(username="alice")
        make_user(username="bob")

        response = api_client.put(
            f"/users/{alice.id}",
            {"username": "bob"},
            format="json",
            HTTP_AUTHORIZATION=bearer(alice),
        )
        assert response.status_code == 400
        assert set(response.json()) == {"error", "message"}

    def test_update_without_fields(self, api_client, user):
        response = api_client.put(
            f"/users/{user.id}",
            {},
            format="json",
            HTTP_AUTHORIZATION=bearer(user),
        )
        assert response.status_code == 400


class TestDeleteUser:
    def test_delete_self(self, api_client, store, user):
        response = api_client.delete(
            f"/users/{user.id}",
            HTTP_AUTHORIZATION=bearer(user),
        )
        assert response.status_code == 200
        assert response.json()["message"]
        assert store.get_by_id(user.id) is None

    def test_delete_other_forbidden(self, api_client, store, make_user):
        alice = make_user(username="alice")
        bob = make_user(username="bob")

        response = api_client.delete(
            f"/users/{bob.id}",
            HTTP_AUTHORIZATION=bearer(alice),
        )
        assert response.status_code == 403
        assert "error" in response.json()
        assert store.get_by_id(bob.id) is not None

    def test_delete_requires_token(self, api_client, user):
        response = api_client.delete(f"/users/{user.id}")
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid authorization header"}

    def test_delete_already_deleted(self, api_client, store, user):
        header_value = bearer(user)
        store.delete(user.id)

        response = api_client.delete(
            f"/users/{user.id}",
            HTTP_AUTHORIZATION=header_value,
        )
        assert response.status_code == 404
