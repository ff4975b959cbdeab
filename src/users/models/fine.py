from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from users.managers import FineQuerySet


class Fine(models.Model):
    TYPE_COPYRIGHT_STRIKE = 'copyright_strike'
    TYPE_PLATFORM_MISUSE = 'platform_misuse'
    TYPE_TOS_VIOLATION = 'tos_violation'
    TYPE_OTHER = 'other'

    TYPE_CHOICES = (
        (TYPE_COPYRIGHT_STRIKE, 'Copyright strike'),
        (TYPE_PLATFORM_MISUSE, 'Platform misuse'),
        (TYPE_TOS_VIOLATION, 'Terms of service violation'),
        (TYPE_OTHER, 'Other'),
    )

    STATUS_PENDING = 'pending'
    STATUS_PAID = 'paid'
    STATUS_CANCELLED = 'cancelled'

    STATUS_CHOICES = (
        (STATUS_PENDING, 'Pending'),
        (STATUS_PAID, 'Paid'),
        (STATUS_CANCELLED, 'Cancelled'),
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='fines'
    )
    amount = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0.01)]
    )
    fine_type = models.CharField(max_length=32, choices=TYPE_CHOICES)
    reason = models.TextField()
    strike_number = models.PositiveSmallIntegerField(default=0)
    status = models.CharField(
        max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING
    )
    is_mock = models.BooleanField(default=False)
    notes = models.TextField(blank=True, null=True)
    issued_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        blank=True,
        null=True,
        related_name='issued_fines',
    )

    paid_at = models.DateTimeField(blank=True, null=True)
    cancelled_at = models.DateTimeField(blank=True, null=True)
    created = models.DateTimeField(auto_now_add=True)

    objects = FineQuerySet.as_manager()

    class Meta:
        ordering = ('-created',)

    def __str__(self):
        return '%s %s (%s)' % (self.get_fine_type_display(), self.amount, self.status)

    @property
    def is_penalty(self):
        return (
            self.fine_type == self.TYPE_OTHER
            and self.reason == settings.STRIKE_PENALTY_REASON
        )
