from django.urls import path
from . import views

app_name = 'bookings'

urlpatterns = [
    path('booking', views.BookingListView.as_view(), name='booking-list'),
    path('booking/<str:booking_id>', views.BookingDetailView.as_view(), name='booking-detail'),
]
