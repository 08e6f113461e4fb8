# tasks/utils.py

from datetime import timedelta
from django.utils import timezone
from .models import TaskBadge, TaskStatus

AT_RISK_WINDOW = timedelta(hours=24)


def classify_badge(due_date, status, now=None):
    """
    Computes the display badge of a task from its due date and status.

    Tasks without a due date and finished tasks are always "On Track".
    Otherwise a task whose due date has passed is "Overdue", one due within
    the next 24 hours (both ends inclusive) is "At Risk", anything later is
    "On Track". The result depends on the current time, so it is computed on
    every read and never stored.
    """
    if due_date is None or status == TaskStatus.DONE:
        return TaskBadge.ON_TRACK

    if now is None:
        now = timezone.now()

    if timezone.is_naive(due_date):
        due_date = timezone.make_aware(due_date)

    remaining = due_date - now

    if remaining < timedelta(0):
        return TaskBadge.OVERDUE

    if remaining <= AT_RISK_WINDOW:
        return TaskBadge.AT_RISK

    return TaskBadge.ON_TRACK
