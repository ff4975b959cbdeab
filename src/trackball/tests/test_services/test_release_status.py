from unittest import mock

from django.core import mail
from django.test import TestCase

from releases.models import Release
from releases.tests.factories import ReleaseFactory
from trackball.services.release_status import (
    ReleaseStatusResponse,
    update_release_status,
)


class UpdateReleaseStatusTestCase(TestCase):
    def setUp(self):
        self.release = ReleaseFactory(status=Release.STATUS_PENDING)

    @mock.patch('trackball.tasks.send_release_status_email.delay')
    def test_status_change_queues_email(self, mock_delay):
        result = update_release_status(self.release.pk, Release.STATUS_APPROVED)

        self.assertTrue(result.success)
        self.release.refresh_from_db()
        self.assertEqual(self.release.status, Release.STATUS_APPROVED)
        mock_delay.assert_called_once_with(self.release.pk, Release.STATUS_APPROVED)

    def test_status_change_sends_email(self):
        update_release_status(
            self.release.pk, Release.STATUS_REJECTED, rejection_reason='Bad artwork'
        )

        self.assertEqual(len(mail.outbox), 1)
        self.assertEqual(mail.outbox[0].to, [self.release.user.email])
        self.assertIn(self.release.title, mail.outbox[0].subject)
        self.assertIn('Bad artwork', mail.outbox[0].body)

    def test_any_status_can_follow_any_status(self):
        self.release.status = Release.STATUS_TAKEN_DOWN
        self.release.save()

        result = update_release_status(self.release.pk, Release.STATUS_PENDING)

        self.assertTrue(result.success)

    def test_status_change_is_recorded(self):
        update_release_status(self.release.pk, Release.STATUS_PROCESSING)
        update_release_status(self.release.pk, Release.STATUS_APPROVED)

        changes = list(
            self.release.status_changes.values_list('old_status', 'new_status')
        )
        self.assertEqual(
            changes,
            [
                (Release.STATUS_PENDING, Release.STATUS_PROCESSING),
                (Release.STATUS_PROCESSING, Release.STATUS_APPROVED),
            ],
        )

    def test_unknown_status_is_refused(self):
        result = update_release_status(self.release.pk, 'published')

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseStatusResponse.FAILED_REASON_INVALID_STATUS
        )
        self.release.refresh_from_db()
        self.assertEqual(self.release.status, Release.STATUS_PENDING)

    def test_unchanged_status_is_refused(self):
        result = update_release_status(self.release.pk, Release.STATUS_PENDING)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseStatusResponse.FAILED_REASON_STATUS_UNCHANGED
        )

    def test_missing_release(self):
        result = update_release_status(self.release.pk + 1000, Release.STATUS_APPROVED)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseStatusResponse.FAILED_REASON_NOT_FOUND
        )

    def test_payment_status_only_sends_no_email(self):
        result = update_release_status(
            self.release.pk, payment_status=Release.PAYMENT_STATUS_PAID
        )

        self.assertTrue(result.success)
        self.release.refresh_from_db()
        self.assertEqual(self.release.payment_status, Release.PAYMENT_STATUS_PAID)
        self.assertEqual(len(mail.outbox), 0)

    def test_nothing_to_update(self):
        result = update_release_status(self.release.pk)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseStatusResponse.FAILED_REASON_NOTHING_TO_UPDATE
        )

    @mock.patch('trackball.tasks.send_release_status_email.delay')
    def test_broker_failure_keeps_status_change(self, mock_delay):
        mock_delay.side_effect = ConnectionError('broker down')

        result = update_release_status(self.release.pk, Release.STATUS_DELIVERED)

        self.assertTrue(result.success)
        self.release.refresh_from_db()
        self.assertEqual(self.release.status, Release.STATUS_DELIVERED)
