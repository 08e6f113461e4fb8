# tasks/serializers.py

from users.serializers import UserShortSerializer
from rest_framework import serializers
from users.utils import *
from .models import *
from .utils import classify_badge


DUE_DATE_INPUT_FORMATS = ['iso-8601', '%Y-%m-%d']


# Serializer for creating a task
class CreateTaskSerializer(serializers.ModelSerializer):
    title = serializers.CharField(
        max_length=255,
        error_messages={
            'required': 'Title is required and must be less than 255 characters',
            'blank': 'Title is required and must be less than 255 characters',
            'max_length': 'Title is required and must be less than 255 characters',
        }
    )
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    priority = serializers.ChoiceField(
        choices=TaskPriority.choices,
        required=False,
        error_messages={'invalid_choice': 'Priority must be Low, Medium, or High'}
    )
    status = serializers.ChoiceField(
        choices=TaskStatus.choices,
        required=False,
        error_messages={'invalid_choice': 'Status must be Backlog, In Progress, Review, or Done'}
    )
    assignee_id = serializers.PrimaryKeyRelatedField(
        source='assignee',
        queryset=User.objects.all(),
        required=False,
        allow_null=True,
        error_messages={
            'does_not_exist': 'Assignee not found',
            'incorrect_type': 'Invalid assignee ID',
        }
    )
    due_date = serializers.DateTimeField(
        required=False,
        allow_null=True,
        input_formats=DUE_DATE_INPUT_FORMATS,
        error_messages={'invalid': 'Due date must be a valid date'}
    )

    class Meta:
        model = Task
        fields = ['title', 'description', 'priority', 'status', 'assignee_id', 'due_date']

    def validate_description(self, value):
        return value or None

    def create(self, validated_data):
        task = super().create(validated_data)

        log_user_action(
            user=self.context['request'].user,
            action_name="Tasks",
            description=f"User created task «{task.title}»"
        )

        return task


# Serializer for changing a task
class ChangeTaskSerializer(CreateTaskSerializer):
    title = serializers.CharField(
        max_length=255,
        error_messages={
            'blank': 'Title must be less than 255 characters',
            'max_length': 'Title must be less than 255 characters',
        }
    )

    def update(self, instance, validated_data):
        # Saved even without changes: every write refreshes updated_at.
        instance = super().update(instance, validated_data)

        log_user_action(
            user=self.context['request'].user,
            action_name="Tasks",
            description=f"User changed task «{instance.title}»: {', '.join(sorted(validated_data))}"
        )

        return instance


# Serializer for task information
class GetTaskSerializer(serializers.ModelSerializer):
    assignee_id = serializers.IntegerField(read_only=True)
    assignee = UserShortSerializer(read_only=True)
    badge = serializers.SerializerMethodField()

    class Meta:
        model = Task
        fields = ['id', 'title', 'description', 'priority', 'status', 'due_date',
                  'created_at', 'updated_at', 'assignee_id', 'assignee', 'badge']

    def get_badge(self, task):
        return classify_badge(task.due_date, task.status).value


# Serializer for task list query parameters
class TaskFilterSerializer(serializers.Serializer):
    assignee = serializers.IntegerField(min_value=1, required=False)
    priority = serializers.ChoiceField(choices=TaskPriority.choices, required=False)
    status = serializers.ChoiceField(choices=TaskStatus.choices, required=False)
