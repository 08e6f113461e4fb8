# management/exceptions.py

import logging

from rest_framework.exceptions import APIException, NotAuthenticated, ValidationError
from rest_framework.views import exception_handler
from rest_framework.response import Response
from rest_framework import status

logger = logging.getLogger(__name__)


class BadRequest(APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Bad request.'
    default_code = 'bad_request'


class InvalidQueryParameters(ValidationError):
    summary = 'Invalid query parameters'


def format_field_errors(detail, prefix=''):
    """
    Flattens serializer errors into a list of {'field', 'message'} items.
    """
    if isinstance(detail, dict):
        errors = []
        for field, value in detail.items():
            name = f"{prefix}.{field}" if prefix else str(field)
            errors.extend(format_field_errors(value, name))
        return errors

    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(format_field_errors(item, prefix))
        return errors

    return [{'field': prefix or 'non_field_errors', 'message': str(detail)}]


def _message_from(data):
    if isinstance(data, dict):
        if 'detail' in data:
            return str(data['detail'])
        if 'message' in data:
            return str(data['message'])
    if isinstance(data, list) and data:
        return str(data[0])
    return str(data)


def api_exception_handler(exc, context):
    """
    Renders every API error as JSON with a human-readable `message`;
    validation errors additionally carry the itemized `errors` list.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.error(
            "Unhandled error in %s",
            view.__class__.__name__ if view is not None else 'request',
            exc_info=exc,
        )
        return Response({'message': 'Internal server error'}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ValidationError):
        response.data = {
            'message': getattr(exc, 'summary', 'Validation failed'),
            'errors': format_field_errors(exc.detail),
        }
    elif isinstance(exc, NotAuthenticated):
        response.data = {'message': 'Access token required'}
    else:
        response.data = {'message': _message_from(response.data)}

    return response
