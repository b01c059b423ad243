from django.contrib import admin
from .models import Booking


@admin.register(Booking)
class BookingAdmin(admin.ModelAdmin):
    list_display = ['id', 'firstname', 'lastname', 'checkin', 'checkout', 'depositpaid']
    search_fields = ['firstname', 'lastname']
    list_filter = ['depositpaid', 'checkin', 'created_at']
