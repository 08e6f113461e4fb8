# management/authentication.py

from rest_framework_simplejwt.authentication import JWTAuthentication
from rest_framework_simplejwt.exceptions import InvalidToken
from rest_framework.exceptions import PermissionDenied


class BearerTokenAuthentication(JWTAuthentication):
    """
    JWT authentication from the `Authorization: Bearer <token>` header.

    A missing token leaves the request anonymous (IsAuthenticated then answers
    401); an invalid or expired token is rejected with 403.
    """

    www_authenticate_realm = 'api'

    def get_validated_token(self, raw_token):
        try:
            return super().get_validated_token(raw_token)
        except InvalidToken:
            raise PermissionDenied('Invalid or expired token')
