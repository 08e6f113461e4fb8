# tests/conftest.py

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import AccessToken

from users.models import User


@pytest.fixture(autouse=True)
def fast_password_hasher(settings):
    settings.PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']


@pytest.fixture()
def api_client():
    return APIClient()


@pytest.fixture()
def make_user(db):
    counter = {'n': 0}

    def _make_user(name=None, email=None, password='secret123'):
        counter['n'] += 1
        user = User(
            name=name or f"User {counter['n']}",
            email=email or f"user{counter['n']}@example.com",
        )
        user.set_password(password)
        user.save()
        return user

    return _make_user


@pytest.fixture()
def user(make_user):
    return make_user(name='Alice', email='alice@example.com')


def client_for(user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {AccessToken.for_user(user)}')
    return client


@pytest.fixture()
def auth_client(user):
    return client_for(user)
