# management/base_access_views.py

from rest_framework.generics import GenericAPIView
from rest_framework.exceptions import NotFound
from rest_framework.permissions import AllowAny, IsAuthenticated
from .exceptions import BadRequest
from .permissions import IsAuthor


def parse_object_id(value, object_name):
    """
    Converts an identifier from the URL into a positive int.
    """
    try:
        object_id = int(value)
    except (TypeError, ValueError):
        raise BadRequest(f'Invalid {object_name.lower()} ID')

    if object_id < 1:
        raise BadRequest(f'Invalid {object_name.lower()} ID')

    return object_id


class BaseObjectView(GenericAPIView):
    """
    Looks objects up by a validated id and reports a missing row as
    "<object_name> not found".
    """
    permission_classes = [IsAuthenticated]
    object_name = 'Object'

    def get_object(self):
        lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
        object_id = parse_object_id(self.kwargs[lookup_url_kwarg], self.object_name)

        queryset = self.filter_queryset(self.get_queryset())

        try:
            obj = queryset.get(**{self.lookup_field: object_id})
        except queryset.model.DoesNotExist:
            raise NotFound(f'{self.object_name} not found')

        self.check_object_permissions(self.request, obj)
        return obj


class BasePublicView(GenericAPIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    # Bad credentials must stay 401 even without an authenticator.
    def get_authenticate_header(self, request):
        return 'Bearer realm="api"'


class BaseAuthorAccessView(BaseObjectView):
    permission_classes = [IsAuthenticated, IsAuthor]
