import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

STATUS_CHOICES = [
    ('pending', 'Pending'),
    ('pending_payment', 'Pending payment'),
    ('pay_later', 'Pay later'),
    ('paid', 'Paid'),
    ('processing', 'Processing'),
    ('approved', 'Approved'),
    ('delivering', 'Delivering'),
    ('delivered', 'Delivered'),
    ('rejected', 'Rejected'),
    ('taken down', 'Taken down'),
    ('striked', 'Striked'),
    ('on hold', 'On hold'),
    ('awaiting final qc', 'Awaiting final QC'),
]


class Migration(migrations.Migration):

    initial = True

    dependencies = [migrations.swappable_dependency(settings.AUTH_USER_MODEL)]

    operations = [
        migrations.CreateModel(
            name='Release',
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
                ('title', models.CharField(max_length=255)),
                ('artist_name', models.CharField(max_length=255)),
                (
                    'status',
                    models.CharField(
                        choices=STATUS_CHOICES,
                        db_index=True,
                        default='pending',
                        max_length=32,
                    ),
                ),
                (
                    'payment_status',
                    models.CharField(
                        choices=[
                            ('unpaid', 'Unpaid'),
                            ('paid', 'Paid'),
                            ('pay_later', 'Pay later'),
                        ],
                        default='unpaid',
                        max_length=16,
                    ),
                ),
                ('takedown_requested', models.BooleanField(default=False)),
                ('rejection_reason', models.TextField(blank=True, null=True)),
                ('notes', models.TextField(blank=True, null=True)),
                (
                    'artwork_url',
                    models.URLField(blank=True, max_length=1024, null=True),
                ),
                (
                    'audio_file_url',
                    models.URLField(blank=True, max_length=1024, null=True),
                ),
                ('release_date', models.DateField(blank=True, null=True)),
                ('created', models.DateTimeField(auto_now_add=True)),
                ('updated', models.DateTimeField(auto_now=True)),
                (
                    'user',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='releases',
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={'ordering': ('-created',)},
        ),
        migrations.CreateModel(
            name='ReleaseStatusChange',
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
                    'old_status',
                    models.CharField(choices=STATUS_CHOICES, max_length=32),
                ),
                (
                    'new_status',
                    models.CharField(choices=STATUS_CHOICES, max_length=32),
                ),
                ('created', models.DateTimeField(auto_now_add=True)),
                (
                    'release',
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name='status_changes',
                        to='releases.release',
                    ),
                ),
            ],
            options={'ordering': ('created', 'pk')},
        ),
    ]
