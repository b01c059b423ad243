"""
System views
"""
from drf_spectacular.utils import extend_schema, OpenApiResponse
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny

from apps.core.utils.helpers import status_response


@extend_schema(
    summary="Health check",
    description="Confirm whether the API is up and running",
    responses={201: OpenApiResponse(description="API is up")},
    tags=['Ping']
)
@api_view(['GET'])
@permission_classes([AllowAny])
def ping(request):
    """
    Health check endpoint
    """
    return status_response(status.HTTP_201_CREATED)
