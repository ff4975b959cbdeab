import factory

from subscriptions.models import TrackAllowanceUsage
from trackball.utils import current_month_year
from users.tests.factories import UserFactory


class TrackAllowanceUsageFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = TrackAllowanceUsage

    user = factory.SubFactory(UserFactory)
    month_year = factory.LazyFunction(current_month_year)
    tracks_allowed = 10
    track_count = 0
