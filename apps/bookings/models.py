"""
Booking model
"""
from django.core.validators import MinValueValidator
from django.db import models
from apps.core.models import TimeStampedModel


class Booking(TimeStampedModel):
    """
    Guest reservation. The integer primary key is the public booking id.
    """
    firstname = models.CharField(max_length=255, db_index=True)
    lastname = models.CharField(max_length=255, db_index=True)

    # Pricing
    totalprice = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    depositpaid = models.BooleanField(default=False)

    # Stay dates, checkin is not required to precede checkout
    checkin = models.DateField(db_index=True)
    checkout = models.DateField(db_index=True)

    additionalneeds = models.CharField(max_length=500, blank=True, null=True)

    class Meta:
        db_table = 'bookings'
        verbose_name = 'Booking'
        verbose_name_plural = 'Bookings'
        ordering = ['id']

    def __str__(self):
        return f"{self.firstname} {self.lastname} - {self.checkin} to {self.checkout}"
