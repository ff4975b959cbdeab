from django.db import models

from trackball.utils import current_month_year


class TrackAllowanceUsageManager(models.Manager):
    def current(self, user):
        return self.filter(user=user, month_year=current_month_year()).first()
