"""
Project-wide DRF exception handler.

Normalises error payloads to ``{"message": ...}`` so every endpoint answers
failures in the same shape the canteen front end reads, and logs server
errors with the request context.
"""
import logging

from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    """
    Wrap DRF's default handler.

    Validation errors keep their field mapping under ``errors``; everything
    else with a ``detail`` is flattened into ``message``.
    """
    response = exception_handler(exc, context)
    request = context.get('request')

    if response is None:
        # Unhandled exception: let Django produce the 500, but record context first
        view = context.get('view')
        logger.error(
            f"Unhandled API error in {view.__class__.__name__ if view else 'unknown view'}: "
            f"{exc.__class__.__name__}: {exc}",
            exc_info=True,
            extra={
                'path': getattr(request, 'path', None),
                'method': getattr(request, 'method', None),
            },
        )
        return None

    data = response.data
    if isinstance(data, dict) and 'detail' in data:
        extra = {key: value for key, value in data.items() if key != 'detail'}
        response.data = {'message': str(data['detail']), **extra}
    elif isinstance(data, (dict, list)):
        response.data = {'message': 'Invalid request data', 'errors': data}

    if response.status_code >= 500 and request is not None:
        logger.error(
            f"API error: {exc.__class__.__name__}",
            extra={
                'status_code': response.status_code,
                'path': request.path,
                'method': request.method,
            },
        )

    return response
