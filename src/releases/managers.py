from django.db import models


class ReleaseQuerySet(models.QuerySet):
    def owned_by(self, user):
        return self.filter(user=user)

    def takedown_requested(self):
        return self.filter(takedown_requested=True)


class ReleaseManager(models.Manager):
    def get_queryset(self):
        return ReleaseQuerySet(self.model, using=self._db)

    def takedown_requested(self):
        return self.get_queryset().takedown_requested()

    def owned_by(self, user):
        return self.get_queryset().owned_by(user)
