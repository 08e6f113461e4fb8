# tests/test_users.py

import pytest

from comments.models import Comment
from tasks.models import Task
from users.models import User

from .conftest import client_for

pytestmark = pytest.mark.django_db


def test_list_users_ordered_by_name(auth_client, user, make_user):
    make_user(name='Zoe')
    make_user(name='Bob')

    response = auth_client.get('/api/users')

    assert response.status_code == 200
    users = response.json()
    assert [u['name'] for u in users] == ['Alice', 'Bob', 'Zoe']
    assert set(users[0]) == {'id', 'name', 'email'}


def test_get_user_details(auth_client, user):
    response = auth_client.get(f'/api/users/{user.id}')

    assert response.status_code == 200
    body = response.json()
    assert body['id'] == user.id
    assert body['email'] == 'alice@example.com'
    assert body['created_at']
    assert 'password' not in body


def test_get_missing_user_is_404(auth_client):
    response = auth_client.get('/api/users/9999')

    assert response.status_code == 404
    assert response.json() == {'message': 'User not found'}


def test_get_user_with_malformed_id_is_400(auth_client):
    response = auth_client.get('/api/users/abc')

    assert response.status_code == 400
    assert response.json() == {'message': 'Invalid user ID'}


def test_my_tasks_only_lists_tasks_assigned_to_me(auth_client, user, make_user):
    other = make_user(name='Bob')
    mine = Task.objects.create(title='Mine', assignee=user)
    Task.objects.create(title='Theirs', assignee=other)
    Task.objects.create(title='Nobody')

    response = auth_client.get('/api/users/me/tasks')

    assert response.status_code == 200
    tasks = response.json()
    assert [task['id'] for task in tasks] == [mine.id]
    assert tasks[0]['badge'] == 'On Track'
    assert tasks[0]['assignee']['id'] == user.id


def test_deleting_user_keeps_tasks_and_removes_comments(user, make_user):
    bob = make_user(name='Bob')
    task = Task.objects.create(title='Shared', assignee=bob)
    Comment.objects.create(task=task, author=bob, body="Bob's note")
    Comment.objects.create(task=task, author=user, body="Alice's note")

    response = client_for(bob).delete('/api/users/me')

    assert response.status_code == 200
    assert not User.objects.filter(pk=bob.pk).exists()
    task.refresh_from_db()
    assert task.assignee_id is None
    assert list(Comment.objects.values_list('body', flat=True)) == ["Alice's note"]


def test_users_require_authentication(api_client):
    assert api_client.get('/api/users').status_code == 401
    assert api_client.get('/api/users/me/tasks').status_code == 401
