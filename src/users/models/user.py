import logging
from datetime import timedelta

from django.conf import settings
from django.contrib.auth.hashers import (
    check_password,
    is_password_usable,
    make_password,
)
from django.db import models
from django.utils import timezone
from rest_framework.authtoken.models import Token

from users.managers import UserManager

logger = logging.getLogger(__name__)


class User(models.Model):
    ACCOUNT_TYPE_ARTIST = 'artist'
    ACCOUNT_TYPE_LABEL = 'label'

    ACCOUNT_TYPE_CHOICES = (
        (ACCOUNT_TYPE_ARTIST, 'Artist'),
        (ACCOUNT_TYPE_LABEL, 'Label'),
    )

    password = models.CharField(max_length=128, blank=True, null=True, default=None)
    last_login = models.DateTimeField(blank=True, null=True)

    first_name = models.CharField(max_length=255, blank=True)
    last_name = models.CharField(max_length=255, blank=True)

    artist_name = models.CharField(max_length=120, blank=True, null=True)

    email = models.EmailField(max_length=120, blank=False, null=False, unique=True)

    account_type = models.CharField(
        max_length=16, choices=ACCOUNT_TYPE_CHOICES, default=ACCOUNT_TYPE_ARTIST
    )

    strike_count = models.PositiveSmallIntegerField(default=0)
    is_banned = models.BooleanField(default=False)
    is_locked = models.BooleanField(default=False)
    locked_until = models.DateTimeField(blank=True, null=True)

    stripe_customer_id = models.CharField(
        max_length=255, blank=True, null=True, default=None
    )

    is_staff = models.BooleanField(default=False)
    is_active = models.BooleanField(default=True)

    created = models.DateTimeField(auto_now_add=True)
    updated = models.DateTimeField(auto_now=True)

    objects = UserManager()

    REQUIRED_FIELDS = []
    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'

    def __str__(self):
        return self.get_full_name() or self.email

    def __repr__(self):
        return '<{} #{}>'.format(self.__class__.__name__, self.pk)

    @property
    def name(self):
        return ' '.join(n for n in (self.first_name, self.last_name) if n)

    @property
    def is_anonymous(self):
        return False

    @property
    def is_authenticated(self):
        return True

    @property
    def is_superuser(self):
        return self.is_staff

    @property
    def is_suspended(self):
        """
        Three real strikes suspend an account by policy. Nothing in the data
        model enforces it, admins act on this flag.
        """
        return self.strike_count >= settings.STRIKE_LIMIT

    @property
    def is_currently_locked(self):
        if not self.is_locked:
            return False
        return self.locked_until is None or self.locked_until > timezone.now()

    def save(self, *args, **kwargs):
        is_adding = self._state.adding

        super().save(*args, **kwargs)

        if is_adding:
            Token.objects.create(user=self)

    def lock(self, days=None):
        days = days or settings.UNPAID_FINE_LOCK_DAYS
        self.is_locked = True
        self.locked_until = timezone.now() + timedelta(days=days)
        self.save(update_fields=['is_locked', 'locked_until', 'updated'])
        logger.info('User %s locked until %s', self.pk, self.locked_until)

    def unlock(self):
        self.is_locked = False
        self.locked_until = None
        self.save(update_fields=['is_locked', 'locked_until', 'updated'])
        logger.info('User %s unlocked', self.pk)

    def get_full_name(self):
        return self.name

    def get_short_name(self):
        return self.first_name

    def get_username(self):
        return getattr(self, self.USERNAME_FIELD)

    def set_password(self, raw_password):
        self.password = make_password(raw_password)

    def set_unusable_password(self):
        self.password = make_password(None)

    def check_password(self, raw_password):
        def setter(raw_password):
            self.set_password(raw_password)
            self.save(update_fields=['password'])

        return check_password(raw_password, self.password, setter)

    def has_usable_password(self):
        return is_password_usable(self.password)

    def is_admin(self):
        return self.is_staff

    def has_module_perms(self, app_label):
        return self.is_staff

    def has_perm(self, perm, obj=None):
        return self.is_staff
