# management/views.py

import logging

from django.http import JsonResponse
from django.utils.timezone import now
from rest_framework.response import Response
from .base_access_views import BasePublicView

logger = logging.getLogger(__name__)


# View for the service health check
class HealthCheckView(BasePublicView):
    def get(self, request):
        return Response({'status': 'OK', 'timestamp': now().isoformat()})


def route_not_found(request, exception=None):
    return JsonResponse({'message': 'Route not found'}, status=404)


def server_error(request):
    logger.error("Unhandled server error on %s %s", request.method, request.path)
    return JsonResponse({'message': 'Internal server error'}, status=500)
