import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [migrations.swappable_dependency(settings.AUTH_USER_MODEL)]

    operations = [
        migrations.CreateModel(
            name='TrackAllowanceUsage',
            fields=[
                (
                    'id',
                    models.AutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name='ID',
                    ),
                ),
                (
                    'month_year',
                    models.CharField(help_text='Format YYYY-MM', max_length=7),
                ),
                ('tracks_allowed', models.PositiveIntegerField(default=0)),
                ('track_count', models.PositiveIntegerField(default=0)),
                (
                    'subscription_id',
                    models.CharField(
                        blank=True,
                        help_text='Stripe subscription backing this allowance',
                        max_length=255,
                        null=True,
                    ),
                ),
                ('updated', models.DateTimeField(auto_now=True)),
                (
                    'user',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='track_allowance_usages',
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                'ordering': ('-month_year',),
                'unique_together': {('user', 'month_year')},
            },
        )
    ]
