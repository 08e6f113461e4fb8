# users/urls.py

from rest_framework_simplejwt.views import TokenRefreshView
from django.urls import path
from .views import *


urlpatterns = [
    path('auth/register', UserRegistrationView.as_view(), name='user-registration'),
    path('auth/login', UserLoginView.as_view(), name='user-login'),
    path('auth/logout', UserLogoutView.as_view(), name='user-logout'),
    path('auth/me', CurrentUserView.as_view(), name='current-user'),
    path('auth/token/refresh', TokenRefreshView.as_view(), name='token-refresh'),
    path('users', GetAllUsersView.as_view(), name='user-list'),
    path('users/me', DeleteUserAccount.as_view(), name='delete-user-account'),
    path('users/me/tasks', MyTasksView.as_view(), name='my-tasks'),
    path('users/<str:pk>', GetUserDetailsView.as_view(), name='user-detail'),
]
