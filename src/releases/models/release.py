from django.conf import settings
from django.db import models

from trackball.db.decorators import observable_fields
from releases.managers import ReleaseManager


@observable_fields(exclude=['user'])
class Release(models.Model):
    STATUS_PENDING = 'pending'
    STATUS_PENDING_PAYMENT = 'pending_payment'
    STATUS_PAY_LATER = 'pay_later'
    STATUS_PAID = 'paid'
    STATUS_PROCESSING = 'processing'
    STATUS_APPROVED = 'approved'
    STATUS_DELIVERING = 'delivering'
    STATUS_DELIVERED = 'delivered'
    STATUS_REJECTED = 'rejected'
    STATUS_TAKEN_DOWN = 'taken down'
    STATUS_STRIKED = 'striked'
    STATUS_ON_HOLD = 'on hold'
    STATUS_AWAITING_FINAL_QC = 'awaiting final qc'

    STATUS_CHOICES = (
        (STATUS_PENDING, 'Pending'),
        (STATUS_PENDING_PAYMENT, 'Pending payment'),
        (STATUS_PAY_LATER, 'Pay later'),
        (STATUS_PAID, 'Paid'),
        (STATUS_PROCESSING, 'Processing'),
        (STATUS_APPROVED, 'Approved'),
        (STATUS_DELIVERING, 'Delivering'),
        (STATUS_DELIVERED, 'Delivered'),
        (STATUS_REJECTED, 'Rejected'),
        (STATUS_TAKEN_DOWN, 'Taken down'),
        (STATUS_STRIKED, 'Striked'),
        (STATUS_ON_HOLD, 'On hold'),
        (STATUS_AWAITING_FINAL_QC, 'Awaiting final QC'),
    )

    STATUS_SET = frozenset(status for status, _ in STATUS_CHOICES)

    # A live or in-flight release has to be taken down before it can go
    NON_DELETABLE_STATUS_SET = frozenset(
        [STATUS_PENDING, STATUS_APPROVED, STATUS_DELIVERING, STATUS_DELIVERED]
    )

    PAYMENT_STATUS_UNPAID = 'unpaid'
    PAYMENT_STATUS_PAID = 'paid'
    PAYMENT_STATUS_PAY_LATER = 'pay_later'

    PAYMENT_STATUS_CHOICES = (
        (PAYMENT_STATUS_UNPAID, 'Unpaid'),
        (PAYMENT_STATUS_PAID, 'Paid'),
        (PAYMENT_STATUS_PAY_LATER, 'Pay later'),
    )

    PAYMENT_STATUS_SET = frozenset(status for status, _ in PAYMENT_STATUS_CHOICES)

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='releases'
    )
    title = models.CharField(max_length=255)
    artist_name = models.CharField(max_length=255)

    status = models.CharField(
        max_length=32, choices=STATUS_CHOICES, default=STATUS_PENDING, db_index=True
    )
    payment_status = models.CharField(
        max_length=16,
        choices=PAYMENT_STATUS_CHOICES,
        default=PAYMENT_STATUS_UNPAID,
    )
    takedown_requested = models.BooleanField(default=False)
    # Only archived releases can be deleted for good
    archived = models.BooleanField(default=False, db_index=True)

    rejection_reason = models.TextField(blank=True, null=True)
    notes = models.TextField(blank=True, null=True)

    artwork_url = models.URLField(max_length=1024, blank=True, null=True)
    audio_file_url = models.URLField(max_length=1024, blank=True, null=True)
    release_date = models.DateField(blank=True, null=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    objects = ReleaseManager()

    class Meta:
        ordering = ('-created',)

    def __str__(self):
        return '%s - %s' % (self.artist_name, self.title)

    @property
    def is_deletable(self):
        return self.status not in self.NON_DELETABLE_STATUS_SET

    @property
    def is_live(self):
        return self.status == self.STATUS_APPROVED


class ReleaseStatusChange(models.Model):
    release = models.ForeignKey(
        Release, on_delete=models.CASCADE, related_name='status_changes'
    )
    old_status = models.CharField(max_length=32, choices=Release.STATUS_CHOICES)
    new_status = models.CharField(max_length=32, choices=Release.STATUS_CHOICES)
    created = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('created', 'pk')

    def __str__(self):
        return 'Release.%s %s -> %s' % (
            self.release_id,
            self.old_status,
            self.new_status,
        )
