import factory

from releases.models import Release
from users.tests.factories import UserFactory


class ReleaseFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = Release

    user = factory.SubFactory(UserFactory)
    title = factory.Faker('sentence', nb_words=3)
    artist_name = factory.SelfAttribute('user.artist_name')
    status = Release.STATUS_PENDING
