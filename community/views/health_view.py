import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework.decorators import api_view
from rest_framework.response import Response

logger = logging.getLogger(__name__)


def database_available():
    try:
        connection.ensure_connection()
    except DatabaseError as exc:
        logger.warning("Database unavailable: %s", exc)
        return False
    return True


@api_view(["GET"])
def health(request):
    return Response({
        "status": "OK",
        "database": database_available(),
        "timestamp": timezone.now().isoformat(),
    })
