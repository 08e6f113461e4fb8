# tasks/models.py

from django.db import models
from users.models import User


class TaskPriority(models.TextChoices):
    LOW = 'Low', 'Low'
    MEDIUM = 'Medium', 'Medium'
    HIGH = 'High', 'High'


class TaskStatus(models.TextChoices):
    BACKLOG = 'Backlog', 'Backlog'
    IN_PROGRESS = 'In Progress', 'In Progress'
    REVIEW = 'Review', 'Review'
    DONE = 'Done', 'Done'


class TaskBadge(models.TextChoices):
    ON_TRACK = 'On Track', 'On Track'
    AT_RISK = 'At Risk', 'At Risk'
    OVERDUE = 'Overdue', 'Overdue'


class Task(models.Model):
    title = models.CharField(max_length=255)
    description = models.TextField(null=True, blank=True)
    priority = models.CharField(max_length=20, choices=TaskPriority.choices, default=TaskPriority.MEDIUM)
    status = models.CharField(max_length=20, choices=TaskStatus.choices, default=TaskStatus.BACKLOG)
    assignee = models.ForeignKey(
        User,
        related_name='assigned_tasks',
        on_delete=models.SET_NULL,
        null=True,
        blank=True
    )
    due_date = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"Task '{self.title}' ({self.status})."
