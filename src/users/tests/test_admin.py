from django.contrib.admin.sites import AdminSite
from django.contrib.messages.storage.fallback import FallbackStorage
from django.test import RequestFactory, TestCase
from rest_framework.authtoken.models import Token

from users.admin import AccountAppealAdmin, UserAdmin, rotate_auth_token
from users.models import AccountAppeal, User
from users.tests.factories import AccountAppealFactory, AdminUserFactory, UserFactory


class AdminTestCase(TestCase):
    def setUp(self):
        self.admin_user = AdminUserFactory()
        self.request = RequestFactory().post('/admin/')
        self.request.user = self.admin_user
        self.request.session = {}
        self.request._messages = FallbackStorage(self.request)

    def test_rotate_auth_token(self):
        user = UserFactory()
        old_key = user.auth_token.key

        rotate_auth_token(Token.objects.filter(user=user))

        self.assertNotEqual(Token.objects.get(user=user).key, old_key)

    def test_ban_and_reset_strikes_actions(self):
        user = UserFactory(strike_count=3)
        user_admin = UserAdmin(User, AdminSite())
        queryset = User.objects.filter(pk=user.pk)

        user_admin.ban_users(self.request, queryset)
        user_admin.reset_strikes(self.request, queryset)

        user.refresh_from_db()
        self.assertTrue(user.is_banned)
        self.assertEqual(user.strike_count, 0)

    def test_lock_action(self):
        user = UserFactory()
        user_admin = UserAdmin(User, AdminSite())

        user_admin.lock_users(self.request, User.objects.filter(pk=user.pk))

        user.refresh_from_db()
        self.assertTrue(user.is_currently_locked)

    def test_approve_appeal_action(self):
        appeal = AccountAppealFactory()
        appeal_admin = AccountAppealAdmin(AccountAppeal, AdminSite())

        appeal_admin.approve_appeals(
            self.request, AccountAppeal.objects.filter(pk=appeal.pk)
        )

        appeal.refresh_from_db()
        self.assertEqual(appeal.status, AccountAppeal.STATUS_APPROVED)
        self.assertEqual(appeal.reviewed_by, self.admin_user)
        appeal.user.refresh_from_db()
        self.assertFalse(appeal.user.is_banned)
