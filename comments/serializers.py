# comments/serializers.py

from users.serializers import UserShortSerializer
from rest_framework import serializers
from users.utils import *
from .models import *


COMMENT_BODY_ERRORS = {
    'required': 'Comment body is required and must be less than 1000 characters',
    'blank': 'Comment body is required and must be less than 1000 characters',
    'max_length': 'Comment body is required and must be less than 1000 characters',
}


# Serializer for creating a comment
class CreateCommentSerializer(serializers.Serializer):
    taskId = serializers.IntegerField(
        min_value=1,
        error_messages={
            'required': 'Valid task ID is required',
            'invalid': 'Valid task ID is required',
            'min_value': 'Valid task ID is required',
        }
    )
    body = serializers.CharField(max_length=1000, error_messages=COMMENT_BODY_ERRORS)

    def create(self, validated_data):
        user = self.context['request'].user
        task = validated_data['task']

        comment = Comment.objects.create(task=task, author=user, body=validated_data['body'])

        log_user_action(
            user=user,
            action_name="Comments",
            description=f"User commented on task «{task.title}»"
        )

        return comment


# Serializer for comments
class GetCommentSerializer(serializers.ModelSerializer):
    taskId = serializers.IntegerField(source='task_id', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)
    author = UserShortSerializer(read_only=True)

    class Meta:
        model = Comment
        fields = ['id', 'taskId', 'body', 'createdAt', 'author']


# Serializer for editing a comment
class UpdateCommentSerializer(serializers.ModelSerializer):
    body = serializers.CharField(max_length=1000, error_messages=COMMENT_BODY_ERRORS)

    class Meta:
        model = Comment
        fields = ['body']

    def update(self, instance, validated_data):
        instance = super().update(instance, validated_data)

        log_user_action(
            user=instance.author,
            action_name="Comments",
            description=f"User edited a comment on task «{instance.task.title}»"
        )

        return instance
