from datetime import timedelta

from django.test import TestCase
from django.utils import timezone
from freezegun import freeze_time
from rest_framework.authtoken.models import Token

from users.models import Fine, User
from users.tests.factories import FineFactory, UserFactory


class UserModelTestCase(TestCase):
    def test_email_is_normalized(self):
        user = User.objects.create_user('Artist@Example.ORG', password='hunter2')

        self.assertEqual(user.email, 'artist@example.org')
        self.assertTrue(user.check_password('hunter2'))

    def test_token_is_created(self):
        user = UserFactory()

        self.assertTrue(Token.objects.filter(user=user).exists())

    def test_superuser_is_staff(self):
        user = User.objects.create_superuser('admin@example.org', 'hunter2')

        self.assertTrue(user.is_staff)
        self.assertTrue(user.is_superuser)

    def test_name(self):
        user = UserFactory(first_name='Ada', last_name='')

        self.assertEqual(user.name, 'Ada')

    def test_suspended_at_three_strikes(self):
        self.assertFalse(UserFactory(strike_count=2).is_suspended)
        self.assertTrue(UserFactory(strike_count=3).is_suspended)

    @freeze_time('2024-01-10 08:00:00')
    def test_lock_and_unlock(self):
        user = UserFactory()

        user.lock()

        self.assertTrue(user.is_currently_locked)
        self.assertEqual(user.locked_until, timezone.now() + timedelta(days=7))
        self.assertIn(user, User.objects.locked())

        user.unlock()

        self.assertFalse(user.is_currently_locked)
        self.assertIsNone(user.locked_until)

    def test_expired_lock(self):
        user = UserFactory(
            is_locked=True, locked_until=timezone.now() - timedelta(minutes=1)
        )

        self.assertFalse(user.is_currently_locked)
        self.assertNotIn(user, User.objects.locked())


class FineModelTestCase(TestCase):
    def test_pending(self):
        user = UserFactory()
        pending = FineFactory(user=user)
        FineFactory(user=user, status=Fine.STATUS_PAID)

        self.assertEqual(list(Fine.objects.filter(user=user).pending()), [pending])
