from datetime import timedelta

from django.test import TestCase
from django.utils import timezone

from trackball.models import MaintenanceSettings
from trackball.tests.factories import AnnouncementBarFactory, MaintenanceSettingsFactory


class PlatformModelsTestCase(TestCase):
    def test_announcement_bar_window(self):
        now = timezone.now()

        self.assertTrue(AnnouncementBarFactory().is_in_effect(now))
        self.assertFalse(AnnouncementBarFactory(is_active=False).is_in_effect(now))
        self.assertFalse(
            AnnouncementBarFactory(start_date=now + timedelta(days=1)).is_in_effect(now)
        )
        self.assertFalse(
            AnnouncementBarFactory(end_date=now - timedelta(days=1)).is_in_effect(now)
        )

    def test_current_maintenance(self):
        self.assertIsNone(MaintenanceSettings.current())

        MaintenanceSettingsFactory(is_active=False)
        self.assertIsNone(MaintenanceSettings.current())

        maintenance = MaintenanceSettingsFactory()
        self.assertEqual(MaintenanceSettings.current(), maintenance)
