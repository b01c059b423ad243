"""
Management command to insert random bootstrap bookings.
"""
import random

from django.core.management.base import BaseCommand

from apps.bookings.services.booking_creator import seed_bookings
from apps.bookings.services.booking_store import booking_store


class Command(BaseCommand):
    help = 'Insert random bootstrap bookings'

    def add_arguments(self, parser):
        parser.add_argument(
            '--count',
            type=int,
            default=10,
            help='Number of bookings to create'
        )
        parser.add_argument(
            '--seed',
            type=int,
            help='Random seed for reproducible data'
        )

    def handle(self, *args, **options):
        rng = random.Random(options['seed']) if options['seed'] is not None else None

        ids = seed_bookings(booking_store, count=options['count'], rng=rng)

        self.stdout.write(self.style.SUCCESS(f'Created {len(ids)} bookings: {ids}'))
