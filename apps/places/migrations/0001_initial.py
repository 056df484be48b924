import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Place",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255, verbose_name="Name")),
                (
                    "property_type",
                    models.CharField(
                        choices=[
                            ("VILLA", "Villa"),
                            ("RESORT", "Resort"),
                            ("CAMPSITE", "Campsite"),
                            ("APARTMENT", "Apartment"),
                            ("HOTEL", "Hotel"),
                        ],
                        max_length=20,
                        verbose_name="Property type",
                    ),
                ),
                ("description", models.TextField(verbose_name="Description")),
                ("main_image", models.CharField(blank=True, default="", max_length=255, verbose_name="Main image")),
                ("cost", models.PositiveIntegerField(verbose_name="Cost per night")),
                ("country", models.CharField(max_length=100, verbose_name="Country")),
                ("city", models.CharField(max_length=100, verbose_name="City")),
                ("address", models.CharField(max_length=255, verbose_name="Address")),
                ("latitude", models.FloatField(verbose_name="Latitude")),
                ("longitude", models.FloatField(verbose_name="Longitude")),
                ("area", models.PositiveIntegerField(verbose_name="Area")),
                ("guests", models.PositiveIntegerField(verbose_name="Guests")),
                ("bedrooms", models.PositiveIntegerField(verbose_name="Bedrooms")),
                ("beds", models.PositiveIntegerField(verbose_name="Beds")),
                ("bathrooms", models.PositiveIntegerField(verbose_name="Bathrooms")),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="places",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Place",
                "verbose_name_plural": "Places",
                "ordering": ["id"],
                "indexes": [models.Index(fields=["country", "city", "guests"], name="place_location_idx")],
            },
        ),
        migrations.CreateModel(
            name="Facility",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("free_parking", models.BooleanField(default=False)),
                ("non_smoking", models.BooleanField(default=False)),
                ("free_wifi", models.BooleanField(default=False)),
                ("breakfast", models.BooleanField(default=False)),
                ("balcony", models.BooleanField(default=False)),
                ("swimming_pool", models.BooleanField(default=False)),
                (
                    "place",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="facility",
                        to="places.place",
                    ),
                ),
            ],
            options={
                "verbose_name": "Facility",
                "verbose_name_plural": "Facilities",
                "ordering": ["id"],
            },
        ),
        migrations.CreateModel(
            name="Regulation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("arrival_time", models.CharField(max_length=50, verbose_name="Arrival time")),
                ("departure_time", models.CharField(max_length=50, verbose_name="Departure time")),
                ("cancellation_policy", models.TextField(blank=True, default="", verbose_name="Cancellation policy")),
                (
                    "payment_method",
                    models.CharField(
                        choices=[
                            ("CASH_ONLY", "Cash only"),
                            ("CARD_ONLY", "Card only"),
                            ("CASH_AND_CARD", "Cash and card"),
                        ],
                        max_length=20,
                        verbose_name="Payment method",
                    ),
                ),
                ("age_restriction", models.BooleanField(default=False)),
                ("pets_allowed", models.BooleanField(default=False)),
                ("events_allowed", models.BooleanField(default=False)),
                ("smoking_allowed", models.BooleanField(default=False)),
                ("quiet_hours", models.CharField(blank=True, default="", max_length=100, verbose_name="Quiet hours")),
                (
                    "place",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="regulation",
                        to="places.place",
                    ),
                ),
            ],
            options={
                "verbose_name": "Regulation",
                "verbose_name_plural": "Regulations",
                "ordering": ["id"],
            },
        ),
    ]
