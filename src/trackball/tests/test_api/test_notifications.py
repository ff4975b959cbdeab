from django.urls import reverse
from rest_framework import status

from trackball.tests.base import TrackballAPITestCase
from users.tests.factories import NotificationFactory


class NotificationAPITestCase(TrackballAPITestCase):
    def setUp(self):
        self.user = self.login()

    def test_list_unread(self):
        NotificationFactory(user=self.user)
        NotificationFactory(user=self.user, is_read=True)
        NotificationFactory()

        response = self.client.get(reverse('notifications'), {'is_read': 'false'})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)

    def test_mark_one_read(self):
        notification = NotificationFactory(user=self.user)

        response = self.client.post(
            reverse('notification-read', args=[notification.pk])
        )

        self.assertEqual(response.data['updated'], 1)
        notification.refresh_from_db()
        self.assertTrue(notification.is_read)

    def test_mark_other_users_notification(self):
        notification = NotificationFactory()

        response = self.client.post(
            reverse('notification-read', args=[notification.pk])
        )

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_mark_all_read(self):
        NotificationFactory(user=self.user)
        NotificationFactory(user=self.user)

        response = self.client.post(reverse('notifications-read-all'))

        self.assertEqual(response.data['updated'], 2)
