"""
Authentication serializers
"""
from rest_framework import serializers


class CredentialsSerializer(serializers.Serializer):
    """Input serializer for the credential exchange"""
    username = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)
    password = serializers.CharField(required=False, allow_blank=True, trim_whitespace=False)


class TokenSerializer(serializers.Serializer):
    """Successful credential exchange"""
    token = serializers.CharField()


class ReasonSerializer(serializers.Serializer):
    """Rejected credential exchange"""
    reason = serializers.CharField()
