from django.test import TestCase

from releases.models import Release
from releases.tests.factories import ReleaseFactory
from trackball.services.release_deletion import (
    ReleaseDeletionResponse,
    archive_release,
    delete_release,
    restore_release,
)
from users.tests.factories import UserFactory


class DeleteReleaseTestCase(TestCase):
    def setUp(self):
        self.user = UserFactory()

    def test_locked_statuses_cannot_be_deleted(self):
        for status in Release.NON_DELETABLE_STATUS_SET:
            release = ReleaseFactory(user=self.user, status=status, archived=True)

            result = delete_release(release, self.user)

            self.assertFalse(result.success)
            self.assertEqual(
                result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_DELETABLE
            )
            self.assertTrue(Release.objects.filter(pk=release.pk).exists())

    def test_archived_releases_can_be_deleted(self):
        for status in Release.STATUS_SET - Release.NON_DELETABLE_STATUS_SET:
            release = ReleaseFactory(user=self.user, status=status, archived=True)

            result = delete_release(release, self.user)

            self.assertTrue(result.success, status)
            self.assertFalse(Release.objects.filter(pk=release.pk).exists())

    def test_release_must_be_archived_first(self):
        release = ReleaseFactory(user=self.user, status=Release.STATUS_REJECTED)

        result = delete_release(release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_ARCHIVED
        )
        self.assertTrue(Release.objects.filter(pk=release.pk).exists())

    def test_only_owner_can_delete(self):
        release = ReleaseFactory(status=Release.STATUS_REJECTED, archived=True)

        result = delete_release(release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_OWNER
        )
        self.assertTrue(Release.objects.filter(pk=release.pk).exists())


class ArchiveReleaseTestCase(TestCase):
    def setUp(self):
        self.user = UserFactory()

    def test_archive_then_restore(self):
        release = ReleaseFactory(user=self.user, status=Release.STATUS_REJECTED)

        result = archive_release(release, self.user)

        self.assertTrue(result.success)
        self.assertTrue(result.release.archived)
        release.refresh_from_db()
        self.assertTrue(release.archived)

        result = restore_release(release, self.user)

        self.assertTrue(result.success)
        release.refresh_from_db()
        self.assertFalse(release.archived)

    def test_locked_statuses_cannot_be_archived(self):
        for status in Release.NON_DELETABLE_STATUS_SET:
            release = ReleaseFactory(user=self.user, status=status)

            result = archive_release(release, self.user)

            self.assertFalse(result.success)
            self.assertEqual(
                result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_DELETABLE
            )
            release.refresh_from_db()
            self.assertFalse(release.archived)

    def test_locked_statuses_cannot_be_restored(self):
        release = ReleaseFactory(
            user=self.user, status=Release.STATUS_DELIVERED, archived=True
        )

        result = restore_release(release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_DELETABLE
        )

    def test_archive_twice(self):
        release = ReleaseFactory(
            user=self.user, status=Release.STATUS_REJECTED, archived=True
        )

        result = archive_release(release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_ALREADY_ARCHIVED
        )

    def test_restore_release_that_is_not_archived(self):
        release = ReleaseFactory(user=self.user, status=Release.STATUS_REJECTED)

        result = restore_release(release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_ARCHIVED
        )

    def test_only_owner_can_archive(self):
        release = ReleaseFactory(status=Release.STATUS_REJECTED)

        result = archive_release(release, self.user)

        self.assertFalse(result.success)
        self.assertEqual(
            result.failure_reason, ReleaseDeletionResponse.FAILED_REASON_NOT_OWNER
        )
        release.refresh_from_db()
        self.assertFalse(release.archived)
