from django.conf import settings
from django.db import models
from django.utils import timezone


class Announcement(models.Model):
    title = models.CharField(max_length=255)
    message = models.TextField()
    is_active = models.BooleanField(default=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True
    )
    created = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ('-created',)

    def __str__(self):
        return self.title


class AnnouncementBar(models.Model):
    message = models.CharField(max_length=512)
    button_text = models.CharField(max_length=64, blank=True, null=True)
    button_link = models.URLField(blank=True, null=True)
    is_active = models.BooleanField(default=False)
    start_date = models.DateTimeField(blank=True, null=True)
    end_date = models.DateTimeField(blank=True, null=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True
    )
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ('-updated',)

    def __str__(self):
        return self.message

    def is_in_effect(self, now=None):
        now = now or timezone.now()
        if not self.is_active:
            return False
        if self.start_date and self.start_date > now:
            return False
        if self.end_date and self.end_date < now:
            return False
        return True


class MaintenanceSettings(models.Model):
    TYPE_SCHEDULED = 'scheduled'
    TYPE_EMERGENCY = 'emergency'

    TYPE_CHOICES = ((TYPE_SCHEDULED, 'Scheduled'), (TYPE_EMERGENCY, 'Emergency'))

    is_active = models.BooleanField(default=False)
    maintenance_type = models.CharField(
        max_length=16, choices=TYPE_CHOICES, default=TYPE_SCHEDULED
    )
    reason = models.TextField()
    start_time = models.DateTimeField()
    end_time = models.DateTimeField()
    updated_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, blank=True, null=True
    )
    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name_plural = 'maintenance settings'
        ordering = ('-updated',)

    def __str__(self):
        return '%s maintenance (%s)' % (self.maintenance_type, self.reason)

    def is_in_effect(self, now=None):
        now = now or timezone.now()
        return self.is_active and self.start_time <= now <= self.end_time

    @classmethod
    def current(cls, now=None):
        for maintenance in cls.objects.filter(is_active=True):
            if maintenance.is_in_effect(now):
                return maintenance
        return None
