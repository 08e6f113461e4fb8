# tasks/views.py

from rest_framework.generics import ListCreateAPIView, ListAPIView, RetrieveUpdateDestroyAPIView
from management.base_access_views import BaseObjectView
from management.exceptions import InvalidQueryParameters
from rest_framework.response import Response
from rest_framework import status
from .serializers import *
from users.utils import *
from .models import *


def get_task_with_assignee(task_id):
    """
    Reads a task back together with its assignee for the response.
    """
    return Task.objects.select_related('assignee').get(pk=task_id)


# View for listing tasks (with filters) and creating a task
class TaskListCreateView(ListCreateAPIView):

    def get_serializer_class(self):
        if self.request.method == 'POST':
            return CreateTaskSerializer
        return GetTaskSerializer

    def get_queryset(self):
        filters = TaskFilterSerializer(data=self.request.query_params)

        if not filters.is_valid():
            raise InvalidQueryParameters(filters.errors)

        queryset = Task.objects.select_related('assignee')
        params = filters.validated_data

        if 'assignee' in params:
            queryset = queryset.filter(assignee_id=params['assignee'])

        if 'priority' in params:
            queryset = queryset.filter(priority=params['priority'])

        if 'status' in params:
            queryset = queryset.filter(status=params['status'])

        return queryset.order_by('-created_at', '-id')

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        task = serializer.save()

        task = get_task_with_assignee(task.pk)

        return Response(
            {'message': 'Task created successfully', 'task': GetTaskSerializer(task).data},
            status=status.HTTP_201_CREATED
        )


# View for reading, changing and deleting a single task
class TaskDetailView(BaseObjectView, RetrieveUpdateDestroyAPIView):
    queryset = Task.objects.select_related('assignee')
    object_name = 'Task'
    http_method_names = ['get', 'put', 'delete', 'head', 'options']

    def get_serializer_class(self):
        if self.request.method == 'PUT':
            return ChangeTaskSerializer
        return GetTaskSerializer

    def update(self, request, *args, **kwargs):
        task = self.get_object()

        serializer = self.get_serializer(task, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        if not serializer.validated_data:
            return Response({'message': 'No fields to update'}, status=status.HTTP_400_BAD_REQUEST)

        task = serializer.save()
        task = get_task_with_assignee(task.pk)

        return Response({'message': 'Task updated successfully', 'task': GetTaskSerializer(task).data})

    def destroy(self, request, *args, **kwargs):
        task = self.get_object()
        task_title = task.title

        task.delete()

        log_user_action(
            user=request.user,
            action_name="Tasks",
            description=f"User deleted task «{task_title}»"
        )

        return Response({'message': 'Task deleted successfully'})


# View for the tasks assigned to the current user
class MyTasksView(ListAPIView):
    serializer_class = GetTaskSerializer

    def get_queryset(self):
        return Task.objects.select_related('assignee').filter(
            assignee=self.request.user
        ).order_by('-created_at', '-id')
