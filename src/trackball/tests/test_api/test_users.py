from unittest import mock

from django.urls import reverse
from rest_framework import status

from trackball.tests.base import TrackballAPITestCase
from users.tests.factories import UserFactory


class CurrentUserAPITestCase(TrackballAPITestCase):
    def test_me(self):
        user = self.login(strike_count=3)

        response = self.client.get(reverse('user-me'))

        self.assertEqual(response.data['email'], user.email)
        self.assertTrue(response.data['is_suspended'])

    def test_update_me(self):
        user = self.login()

        response = self.client.patch(
            reverse('user-me'), {'artist_name': 'DJ Test', 'strike_count': 0}
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        user.refresh_from_db()
        self.assertEqual(user.artist_name, 'DJ Test')


class UserModerationAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.login_admin()
        self.user = UserFactory(strike_count=2)

    def _moderate(self, **data):
        return self.client.post(
            reverse('admin-user-moderation', args=[self.user.pk]), data
        )

    def test_ban(self):
        response = self._moderate(action='ban')

        self.assertTrue(response.data['is_banned'])

    def test_lock_for_days(self):
        response = self._moderate(action='lock', days=3)

        self.assertTrue(response.data['is_locked'])
        self.user.refresh_from_db()
        self.assertTrue(self.user.is_currently_locked)

    def test_reset_strikes(self):
        response = self._moderate(action='reset_strikes')

        self.assertEqual(response.data['strike_count'], 0)

    def test_unknown_action(self):
        response = self._moderate(action='delete')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    @mock.patch('trackball.tasks.send_user_email.delay')
    def test_send_email(self, mock_delay):
        response = self.client.post(
            reverse('admin-user-email', args=[self.user.pk]),
            {'subject': 'Hi', 'message': 'Your release is live'},
        )

        self.assertEqual(response.status_code, status.HTTP_202_ACCEPTED)
        mock_delay.assert_called_once_with(self.user.pk, 'Hi', 'Your release is live')
