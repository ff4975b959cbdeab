from django.test import TestCase

from releases.models import Release
from releases.tests.factories import ReleaseFactory
from trackball.services.takedown import (
    TakedownResponse,
    process_takedown,
    request_takedown,
)
from users.models import Notification
from users.tests.factories import UserFactory


class RequestTakedownTestCase(TestCase):
    def setUp(self):
        self.user = UserFactory()
        self.release = ReleaseFactory(user=self.user, status=Release.STATUS_APPROVED)

    def test_request_takedown_of_live_release(self):
        result = request_takedown(self.release, self.user)

        self.assertTrue(result.success)
        self.release.refresh_from_db()
        self.assertTrue(self.release.takedown_requested)
        self.assertEqual(self.release.status, Release.STATUS_APPROVED)

    def test_can_only_takedown_approved_releases(self):
        for status in Release.STATUS_SET - {Release.STATUS_APPROVED}:
            self.release.status = status
            self.release.save()

            result = request_takedown(self.release, self.user)

            self.assertFalse(result.success)
            self.assertEqual(result.failure_reason, TakedownResponse.FAILED_REASON_NOT_LIVE)

        self.release.refresh_from_db()
        self.assertFalse(self.release.takedown_requested)

    def test_cannot_request_twice(self):
        request_takedown(self.release, self.user)

        result = request_takedown(self.release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, TakedownResponse.FAILED_REASON_TAKEDOWN_IN_PROGRESS
        )

    def test_only_owner_can_request(self):
        result = request_takedown(self.release, UserFactory())

        self.assertFalse(result.success)
        self.assertEqual(result.failure_reason, TakedownResponse.FAILED_REASON_NOT_OWNER)
        self.release.refresh_from_db()
        self.assertFalse(self.release.takedown_requested)


class ProcessTakedownTestCase(TestCase):
    def setUp(self):
        self.user = UserFactory()
        self.release = ReleaseFactory(
            user=self.user, status=Release.STATUS_APPROVED, takedown_requested=True
        )

    def test_approve_takes_release_down(self):
        result = process_takedown(self.release, approved=True)

        self.assertTrue(result.success)
        self.release.refresh_from_db()
        self.assertFalse(self.release.takedown_requested)
        self.assertEqual(self.release.status, Release.STATUS_TAKEN_DOWN)

        notification = Notification.objects.get(user=self.user)
        self.assertEqual(notification.title, 'Takedown Request Approved')
        self.assertEqual(notification.type, Notification.TYPE_SUCCESS)

    def test_approve_logs_status_change(self):
        process_takedown(self.release, approved=True)

        change = self.release.status_changes.get()
        self.assertEqual(change.old_status, Release.STATUS_APPROVED)
        self.assertEqual(change.new_status, Release.STATUS_TAKEN_DOWN)

    def test_deny_keeps_release_live(self):
        result = process_takedown(
            self.release, approved=False, admin_notes='Release is under contract'
        )

        self.assertTrue(result.success)
        self.release.refresh_from_db()
        self.assertFalse(self.release.takedown_requested)
        self.assertEqual(self.release.status, Release.STATUS_APPROVED)
        self.assertIn('Release is under contract', self.release.notes)

        notification = Notification.objects.get(user=self.user)
        self.assertEqual(notification.title, 'Takedown Request Denied')
        self.assertEqual(notification.type, Notification.TYPE_WARNING)
        self.assertIn('Release is under contract', notification.message)

    def test_nothing_to_process_without_request(self):
        self.release.takedown_requested = False
        self.release.save()

        result = process_takedown(self.release, approved=True)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, TakedownResponse.FAILED_REASON_NO_TAKEDOWN_REQUESTED
        )
        self.assertFalse(Notification.objects.exists())
