# tests/test_badges.py

from datetime import datetime, timedelta, timezone as dt_timezone

import pytest
from django.utils import timezone

from tasks.models import TaskBadge, TaskStatus
from tasks.utils import classify_badge

NOW = datetime(2026, 3, 10, 12, 0, 0, tzinfo=dt_timezone.utc)


@pytest.mark.parametrize('status', [*TaskStatus.values, 'Archived'])
def test_task_without_due_date_is_on_track(status):
    assert classify_badge(None, status, now=NOW) == TaskBadge.ON_TRACK


def test_done_task_is_on_track_even_when_long_past_due():
    due = NOW - timedelta(days=365)
    assert classify_badge(due, TaskStatus.DONE, now=NOW) == TaskBadge.ON_TRACK


def test_past_due_date_is_overdue():
    due = NOW - timedelta(hours=1)
    assert classify_badge(due, TaskStatus.BACKLOG, now=NOW) == TaskBadge.OVERDUE


def test_one_microsecond_past_due_is_overdue():
    due = NOW - timedelta(microseconds=1)
    assert classify_badge(due, TaskStatus.IN_PROGRESS, now=NOW) == TaskBadge.OVERDUE


def test_exactly_24_hours_left_is_at_risk():
    due = NOW + timedelta(hours=24)
    assert classify_badge(due, TaskStatus.IN_PROGRESS, now=NOW) == TaskBadge.AT_RISK


def test_just_over_24_hours_left_is_on_track():
    due = NOW + timedelta(hours=24, seconds=1)
    assert classify_badge(due, TaskStatus.IN_PROGRESS, now=NOW) == TaskBadge.ON_TRACK


def test_due_right_now_is_at_risk_not_overdue():
    assert classify_badge(NOW, TaskStatus.REVIEW, now=NOW) == TaskBadge.AT_RISK


def test_far_future_due_date_is_on_track():
    due = NOW + timedelta(days=10)
    assert classify_badge(due, TaskStatus.BACKLOG, now=NOW) == TaskBadge.ON_TRACK


def test_defaults_to_current_time():
    assert classify_badge(timezone.now() - timedelta(minutes=5), TaskStatus.REVIEW) == TaskBadge.OVERDUE
    assert classify_badge(timezone.now() + timedelta(hours=2), TaskStatus.REVIEW) == TaskBadge.AT_RISK


def test_naive_due_date_is_read_in_current_time_zone(settings):
    settings.TIME_ZONE = 'UTC'
    due = datetime(2026, 3, 10, 11, 0, 0)
    assert classify_badge(due, TaskStatus.BACKLOG, now=NOW) == TaskBadge.OVERDUE
