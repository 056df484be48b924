import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('places', '0001_initial'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Review',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                (
                    'rating',
                    models.CharField(
                        choices=[
                            ('UNRATED', 'Unrated'),
                            ('ONE_STAR', 'One star'),
                            ('TWO_STARS', 'Two stars'),
                            ('THREE_STARS', 'Three stars'),
                            ('FOUR_STARS', 'Four stars'),
                            ('FIVE_STARS', 'Five stars'),
                        ],
                        default='UNRATED',
                        max_length=20,
                    ),
                ),
                ('comment', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                (
                    'place',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='reviews',
                        to='places.place',
                    ),
                ),
                (
                    'user',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='reviews',
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                'verbose_name': 'Review',
                'verbose_name_plural': 'Reviews',
                'ordering': ['-created_at', '-id'],
                'indexes': [models.Index(fields=['place', '-created_at'], name='review_place_created_idx')],
                'constraints': [
                    models.UniqueConstraint(fields=('user', 'place'), name='unique_review_per_user_place'),
                ],
            },
        ),
    ]
