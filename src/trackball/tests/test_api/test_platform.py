from django.urls import reverse
from rest_framework import status

from trackball.tests.base import TrackballAPITestCase
from trackball.tests.factories import (
    AnnouncementBarFactory,
    AnnouncementFactory,
    MaintenanceSettingsFactory,
)


class PlatformStatusAPITestCase(TrackballAPITestCase):
    def test_status_is_public(self):
        AnnouncementFactory(title='New stores')
        AnnouncementFactory(is_active=False)
        AnnouncementBarFactory(message='Summer sale')
        MaintenanceSettingsFactory(reason='Upgrade')

        response = self.client.get(reverse('platform-status'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([a['title'] for a in response.data['announcements']], ['New stores'])
        self.assertEqual(response.data['announcement_bar']['message'], 'Summer sale')
        self.assertEqual(response.data['maintenance']['reason'], 'Upgrade')

    def test_quiet_platform(self):
        response = self.client.get(reverse('platform-status'))

        self.assertEqual(response.data['announcements'], [])
        self.assertIsNone(response.data['announcement_bar'])
        self.assertIsNone(response.data['maintenance'])
