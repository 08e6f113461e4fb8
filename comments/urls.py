# comments/urls.py

from django.urls import path
from .views import *

urlpatterns = [
    path('comments/task/<str:task_id>', GetCommentsByTaskIdView.as_view(), name='task-comments'),
    path('comments', CreateCommentView.as_view(), name='create-comment'),
    path('comments/<str:pk>', CommentDetailView.as_view(), name='comment-detail'),
]
