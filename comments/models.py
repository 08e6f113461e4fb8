# comments/models.py

from django.db import models
from users.models import User
from tasks.models import Task


class Comment(models.Model):
    author = models.ForeignKey(
        User,
        related_name='user_comments',
        on_delete=models.CASCADE
    )
    task = models.ForeignKey(
        Task,
        related_name='task_comments',
        on_delete=models.CASCADE
    )
    body = models.TextField(max_length=1000)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['created_at', 'id']

    def __str__(self):
        return f"Comment by {self.author.name} on task '{self.task.title}'."
