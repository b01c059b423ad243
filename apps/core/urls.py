"""
URL configuration for system endpoints.
"""
from django.urls import path
from apps.core import views

urlpatterns = [
    path('ping', views.ping, name='ping'),
]
