import django.core.validators
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('firstname', models.CharField(db_index=True, max_length=255)),
                ('lastname', models.CharField(db_index=True, max_length=255)),
                ('totalprice', models.DecimalField(decimal_places=2, max_digits=10, validators=[django.core.validators.MinValueValidator(0)])),
                ('depositpaid', models.BooleanField(default=False)),
                ('checkin', models.DateField(db_index=True)),
                ('checkout', models.DateField(db_index=True)),
                ('additionalneeds', models.CharField(blank=True, max_length=500, null=True)),
            ],
            options={
                'verbose_name': 'Booking',
                'verbose_name_plural': 'Bookings',
                'db_table': 'bookings',
                'ordering': ['id'],
            },
        ),
    ]
