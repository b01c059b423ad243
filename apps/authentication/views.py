"""
Authentication views
"""
from drf_spectacular.utils import extend_schema, OpenApiExample, PolymorphicProxySerializer
from rest_framework.decorators import api_view, permission_classes, renderer_classes
from rest_framework.permissions import AllowAny
from rest_framework.renderers import JSONRenderer
from rest_framework.response import Response

from .serializers import CredentialsSerializer, TokenSerializer, ReasonSerializer
from .services.token_service import token_service, BAD_CREDENTIALS


@extend_schema(
    summary="Create token",
    description=(
        "Exchange the admin credentials for a token usable as the `token` cookie "
        "on PUT and DELETE. Rejected credentials also answer 200, with a reason."
    ),
    request=CredentialsSerializer,
    responses={
        200: PolymorphicProxySerializer(
            component_name='AuthResult',
            serializers=[TokenSerializer, ReasonSerializer],
            resource_type_field_name=None,
        )
    },
    examples=[
        OpenApiExample(
            'Admin credentials',
            value={'username': 'admin', 'password': 'password123'},
            request_only=True
        )
    ],
    tags=['Auth']
)
@api_view(['POST'])
@permission_classes([AllowAny])
@renderer_classes([JSONRenderer])
def create_token(request):
    """
    Create a token for write access
    """
    serializer = CredentialsSerializer(data=request.data)

    if not serializer.is_valid():
        return Response({'reason': BAD_CREDENTIALS})

    token, reason = token_service.exchange(
        serializer.validated_data.get('username'),
        serializer.validated_data.get('password'),
    )

    if token is None:
        return Response({'reason': reason})

    return Response({'token': token})
