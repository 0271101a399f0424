import pytest
from rest_framework.test import APIClient

from api_users.database import UserStore
from api_users.utils import Hasher

from .helpers import PASSWORD


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def make_user(db, store):
    def _make_user(username: str = "alice", password: str = PASSWORD, **fields):
        values = {
            "first_name": "Alice",
            "last_name": "Liddell",
            "username": username,
            "password_hash": Hasher.hash_password(password),
        }
        values.update(fields)
        return store.insert(values)

    return _make_user


@pytest.fixture
def user(make_user):
    return make_user()
