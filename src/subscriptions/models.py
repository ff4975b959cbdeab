from django.conf import settings
from django.db import models

from subscriptions.managers import TrackAllowanceUsageManager


class TrackAllowanceUsage(models.Model):
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name='track_allowance_usages',
    )
    month_year = models.CharField(max_length=7, help_text="Format YYYY-MM")
    tracks_allowed = models.PositiveIntegerField(default=0)
    track_count = models.PositiveIntegerField(default=0)
    subscription_id = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Stripe subscription backing this allowance",
    )
    updated = models.DateTimeField(auto_now=True)

    objects = TrackAllowanceUsageManager()

    class Meta:
        unique_together = ('user', 'month_year')
        ordering = ('-month_year',)

    def __str__(self):
        return '%s %s: %s/%s' % (
            self.user_id,
            self.month_year,
            self.track_count,
            self.tracks_allowed,
        )

    @property
    def remaining(self):
        return max(self.tracks_allowed - self.track_count, 0)
