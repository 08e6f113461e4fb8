# users/serializers.py

from rest_framework_simplejwt.tokens import RefreshToken
from rest_framework.validators import UniqueValidator
from rest_framework.exceptions import AuthenticationFailed
from rest_framework import serializers
from .models import *
from .utils import *


# Serializer for user registration
class UserRegistrationSerializer(serializers.ModelSerializer):
    name = serializers.CharField(
        min_length=2,
        max_length=255,
        error_messages={
            'blank': 'Name must be at least 2 characters long',
            'min_length': 'Name must be at least 2 characters long',
        }
    )
    email = serializers.EmailField(
        max_length=255,
        error_messages={'invalid': 'Please provide a valid email'},
        validators=[
            UniqueValidator(
                queryset=User.objects.all(),
                message="User with this email already exists",
                lookup='iexact'
            )
        ]
    )
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        trim_whitespace=False,
        error_messages={
            'blank': 'Password must be at least 6 characters long',
            'min_length': 'Password must be at least 6 characters long',
        }
    )

    class Meta:
        model = User
        fields = ('name', 'email', 'password')

    def validate_email(self, value):
        return value.lower()

    def create(self, validated_data):
        password = validated_data.pop('password')

        user = User(**validated_data)
        user.set_password(password)
        user.save()

        log_user_action(
            user=user,
            action_name="Accounts",
            description="User registered an account"
        )

        return user


# Serializer for signing a user in
class UserLoginSerializer(serializers.Serializer):
    email = serializers.EmailField(error_messages={'invalid': 'Please provide a valid email'})
    password = serializers.CharField(
        write_only=True,
        trim_whitespace=False,
        error_messages={'blank': 'Password is required'}
    )

    def validate(self, data):
        email = data.get('email')
        password = data.get('password')

        user = User.objects.filter(email__iexact=email).first()

        if user is None or not user.check_password(password):
            raise AuthenticationFailed('Invalid email or password')

        if not user.is_active:
            log_user_action(
                user=user,
                action_name="Accounts",
                description="User tried to sign in",
                status='Access denied'
            )
            raise AuthenticationFailed('Account is disabled')

        data['user'] = user

        return data

    def create(self, validated_data):
        user = validated_data['user']

        log_user_action(
            user=user,
            action_name="Accounts",
            description="User signed in"
        )

        return build_auth_payload(user, 'Login successful')


# Serializer for the short user card (assignee, comment author, user list)
class UserShortSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email']


# Serializer for user details
class UserDetailSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'name', 'email', 'created_at']


def build_auth_payload(user, message):
    """
    Issues a token pair for the user and shapes the auth response.
    """
    refresh_token = RefreshToken.for_user(user)

    return {
        'message': message,
        'token': str(refresh_token.access_token),
        'refresh_token': str(refresh_token),
        'user': UserShortSerializer(user).data,
    }
