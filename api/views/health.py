"""
Health check endpoint
"""
import logging

from django.db import DatabaseError, connection
from django.utils import timezone
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.payments.gateway import get_payment_gateway

logger = logging.getLogger(__name__)


class HealthCheckView(APIView):
    """
    System health check endpoint.

    Returns the status of the API, database connectivity
    and the configured payment gateway.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        """
        Check system health.
        """
        # Check database connectivity
        db_status = "healthy"
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
        except DatabaseError as e:
            logger.error(f"Health check database failure: {e}")
            db_status = f"unhealthy: {str(e)}"

        response_data = {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "version": "1.0.0",
            "database": db_status,
            "paymentGateway": get_payment_gateway().name,
            "timestamp": timezone.now().isoformat()
        }

        return Response(response_data, status=status.HTTP_200_OK)
