"""
Authentication permissions
"""
from rest_framework import permissions

from .services.token_service import token_service


class HasLiveToken(permissions.BasePermission):
    """
    Permission for requests carrying a live token cookie or admin basic auth
    """
    message = "A valid token cookie or admin basic authorization is required"

    def has_permission(self, request, view):
        return token_service.authorize(
            request.COOKIES.get('token'),
            request.META.get('HTTP_AUTHORIZATION'),
        )
