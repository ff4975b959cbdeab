from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models


class PayoutRequest(models.Model):
    STATUS_PENDING = 'pending'
    STATUS_APPROVED = 'approved'
    STATUS_REJECTED = 'rejected'
    STATUS_PAID = 'paid'

    STATUS_CHOICES = (
        (STATUS_PENDING, 'Pending'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_REJECTED, 'Rejected'),
        (STATUS_PAID, 'Paid'),
    )

    PAYABLE_STATUS_SET = frozenset([STATUS_PENDING, STATUS_APPROVED])

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='payout_requests',
    )
    amount = models.DecimalField(
        max_digits=10, decimal_places=2, validators=[MinValueValidator(0.01)]
    )
    status = models.CharField(
        max_length=16, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True
    )
    notes = models.TextField(blank=True, null=True)
    stripe_payout_id = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="External payout identifier at Stripe",
    )
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-created',)

    def __str__(self):
        return '%s %s (%s)' % (self.user_id, self.amount, self.status)

    @property
    def is_payable(self):
        return self.status in self.PAYABLE_STATUS_SET
