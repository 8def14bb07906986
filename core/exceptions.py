"""
Surveillance error taxonomy and the API exception handler.

- Unauthenticated: no caller identity, nothing is computed
- ScopeDenied: caller role lacks the requested scope
- RecordNotFound: referenced animal or disease case is absent
- InvalidFilter: malformed filter / query values
- Anything else is an internal error: logged with context, generic 500 body
"""

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class Unauthenticated(exceptions.NotAuthenticated):
    default_detail = 'Unauthorized'


class ScopeDenied(exceptions.PermissionDenied):
    default_detail = 'You do not have access to the requested scope.'


class RecordNotFound(exceptions.NotFound):
    default_detail = 'Record not found'


class InvalidFilter(exceptions.ValidationError):
    default_detail = 'Invalid filter parameters.'


def api_exception_handler(exc, context):
    """
    Render every API error as ``{"error": ...}``.

    DRF exceptions keep their status code. Unexpected exceptions are logged
    with the failing view and request path and answered with a generic 500.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        request = context.get('request')
        logger.error(
            f"Unhandled error in {view.__class__.__name__ if view else 'unknown view'} "
            f"({getattr(request, 'method', '?')} {getattr(request, 'path', '?')}): {exc}",
            exc_info=exc,
        )
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(response.data, dict) and set(response.data) == {'detail'}:
        response.data = {'error': response.data['detail']}
    elif isinstance(exc, exceptions.ValidationError):
        response.data = {'error': 'Validation failed', 'errors': response.data}

    return response
