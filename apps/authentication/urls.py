"""
Authentication URL Configuration
"""
from django.urls import path
from . import views

urlpatterns = [
    path('auth', views.create_token, name='create-token'),
]
