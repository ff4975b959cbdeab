from django.contrib.auth.models import BaseUserManager
from django.db import models
from django.utils import timezone


class UserQuerySet(models.QuerySet):
    def locked(self):
        return self.filter(is_locked=True).filter(
            models.Q(locked_until__isnull=True) | models.Q(locked_until__gt=timezone.now())
        )


class UserManager(BaseUserManager.from_queryset(UserQuerySet)):
    @classmethod
    def normalize_email(cls, email):
        """Normalizes email addresses by lowercasing
        the domain portion and name portion of the email address."""
        normalized = super(UserManager, cls).normalize_email(email)
        return normalized.lower()

    def create_user(self, email, password=None, **fields):
        user = self.model(email=self.normalize_email(email), **fields)
        if password:
            user.set_password(password)

        if password is None or password == '':
            user.set_unusable_password()

        user.save(using=self._db)
        return user

    def create_superuser(self, email, password):
        user = self.create_user(email, password=password)
        user.is_staff = True
        user.save(using=self._db)
        return user


class FineQuerySet(models.QuerySet):
    def pending(self):
        return self.filter(status='pending')


class NotificationQuerySet(models.QuerySet):
    def unread(self):
        return self.filter(is_read=False)
