import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

User = get_user_model()

PASSWORD = "secret-pass-1"


def create_user(username: str = "bob", password: str = PASSWORD, **extra):
    extra.setdefault("email", f"{username.lower()}@example.com")
    extra.setdefault("is_active", True)
    extra.setdefault("disp", username)
    return User.objects.create_user(username=username, password=password, **extra)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def user(db):
    return create_user()
