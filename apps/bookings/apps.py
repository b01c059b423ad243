"""
Bookings app configuration
"""
from django.apps import AppConfig


class BookingsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.bookings'
    verbose_name = 'Bookings'

    def ready(self):
        # Import signals to register them
        import apps.bookings.signals  # noqa: F401
