import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe; reports 503 when the database cannot be reached."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
    except DatabaseError:
        logger.exception("Health check: database unavailable")
        return JsonResponse({'status': 'unavailable', 'database': False}, status=503)

    return JsonResponse({
        'status': 'ok',
        'database': True,
        'checkin_time_zone': settings.CHECKIN_TIME_ZONE,
    })


def error_404(request, exception):
    """JSON 404 for unknown API paths."""
    return JsonResponse({'error': 'Not found', 'path': request.path}, status=404)


def error_500(request):
    """JSON 500; the traceback has already been logged by Django."""
    return JsonResponse({
        'error': f'Something went wrong. Please contact {settings.SUPPORT_EMAIL}',
    }, status=500)
