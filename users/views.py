# users/views.py

from rest_framework.generics import CreateAPIView, ListAPIView, RetrieveAPIView, DestroyAPIView
from management.base_access_views import BaseObjectView, BasePublicView
from rest_framework.response import Response
from rest_framework.views import APIView
from tasks.views import MyTasksView
from .utils import log_user_action
from rest_framework import status
from .serializers import *
from .models import *


# View for user registration
class UserRegistrationView(BasePublicView, CreateAPIView):
    queryset = User.objects.all()
    serializer_class = UserRegistrationSerializer

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        return Response(build_auth_payload(user, 'User registered successfully'), status=status.HTTP_201_CREATED)


# View for signing users in
class UserLoginView(BasePublicView):
    serializer_class = UserLoginSerializer

    def post(self, request):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.save()
        return Response(data, status=status.HTTP_200_OK)


# View for signing users out (the client drops its token)
class UserLogoutView(APIView):
    def post(self, request):
        log_user_action(
            user=request.user,
            action_name="Accounts",
            description="User signed out"
        )
        return Response({'message': 'Logout successful'})


# View for the current user's profile
class CurrentUserView(APIView):
    def get(self, request):
        return Response({'user': UserShortSerializer(request.user).data})


# View for the list of all users (assignee choices)
class GetAllUsersView(ListAPIView):
    serializer_class = UserShortSerializer

    def get_queryset(self):
        return User.objects.order_by('name', 'id')


# View for a single user's details
class GetUserDetailsView(BaseObjectView, RetrieveAPIView):
    queryset = User.objects.all()
    serializer_class = UserDetailSerializer
    object_name = 'User'


# View for deleting the current user's account
class DeleteUserAccount(DestroyAPIView):

    def get_object(self):
        return self.request.user

    def destroy(self, request, *args, **kwargs):
        user = self.get_object()

        log_user_action(
            user=user,
            action_name="Accounts",
            description="User deleted their account"
        )

        # Assigned tasks lose their assignee, authored comments are removed.
        user.delete()

        return Response({'message': 'Account deleted successfully'})
