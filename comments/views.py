# comments/views.py

from rest_framework.generics import CreateAPIView, ListAPIView, UpdateAPIView, DestroyAPIView
from management.base_access_views import BaseAuthorAccessView, parse_object_id
from rest_framework.exceptions import NotFound
from rest_framework.response import Response
from rest_framework import status
from users.utils import log_user_action
from tasks.models import Task
from .serializers import *
from .models import *


def get_task_or_404(task_id):
    task = Task.objects.filter(pk=task_id).first()

    if task is None:
        raise NotFound('Task not found')
    return task


def get_comment_with_author(comment_id):
    return Comment.objects.select_related('author').get(pk=comment_id)


# View for the comments of a task
class GetCommentsByTaskIdView(ListAPIView):
    serializer_class = GetCommentSerializer

    def get_queryset(self):
        task_id = parse_object_id(self.kwargs['task_id'], 'Task')
        task = get_task_or_404(task_id)

        return Comment.objects.select_related('author').filter(task=task).order_by('created_at', 'id')


# View for creating a comment
class CreateCommentView(CreateAPIView):
    serializer_class = CreateCommentSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = get_task_or_404(serializer.validated_data['taskId'])
        comment = serializer.save(task=task)
        comment = get_comment_with_author(comment.pk)

        return Response(
            {'message': 'Comment created successfully', 'comment': GetCommentSerializer(comment).data},
            status=status.HTTP_201_CREATED
        )


# View for editing and deleting a comment, allowed to its author only
class CommentDetailView(BaseAuthorAccessView, UpdateAPIView, DestroyAPIView):
    queryset = Comment.objects.select_related('author', 'task')
    serializer_class = UpdateCommentSerializer
    object_name = 'Comment'
    http_method_names = ['put', 'delete', 'options']

    def update(self, request, *args, **kwargs):
        comment = self.get_object()

        serializer = self.get_serializer(comment, data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        comment = get_comment_with_author(comment.pk)

        return Response({'message': 'Comment updated successfully', 'comment': GetCommentSerializer(comment).data})

    def destroy(self, request, *args, **kwargs):
        comment = self.get_object()
        task_title = comment.task.title

        comment.delete()

        log_user_action(
            user=request.user,
            action_name="Comments",
            description=f"User deleted a comment on task «{task_title}»"
        )

        return Response({'message': 'Comment deleted successfully'})
