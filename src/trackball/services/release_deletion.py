import logging

from django.db import transaction

from releases.models import Release

logger = logging.getLogger(__name__)


class ReleaseDeletionResponse:
    FAILED_REASON_NOT_OWNER = "not_owner"
    FAILED_REASON_NOT_DELETABLE = "not_deletable"
    FAILED_REASON_NOT_ARCHIVED = "not_archived"
    FAILED_REASON_ALREADY_ARCHIVED = "already_archived"

    def __init__(self, success, error_reason=None, release=None):
        self.success = success
        self.failure_reason = error_reason
        self.release = release


def _check_release(release, user):
    if release.user_id != user.pk:
        return ReleaseDeletionResponse(
            False, ReleaseDeletionResponse.FAILED_REASON_NOT_OWNER
        )

    if not release.is_deletable:
        return ReleaseDeletionResponse(
            False, ReleaseDeletionResponse.FAILED_REASON_NOT_DELETABLE
        )

    return None


def _set_archived(release, user, archived):
    with transaction.atomic():
        release = Release.objects.select_for_update().get(pk=release.pk)

        failure = _check_release(release, user)
        if failure is not None:
            return failure

        if release.archived == archived:
            return ReleaseDeletionResponse(
                False,
                ReleaseDeletionResponse.FAILED_REASON_ALREADY_ARCHIVED
                if archived
                else ReleaseDeletionResponse.FAILED_REASON_NOT_ARCHIVED,
            )

        release.archived = archived
        release.save(update_fields=['archived', 'updated'])

    logger.info(
        f"Release ({release.pk}) {'archived' if archived else 'restored'} "
        f"by user ({user.id})"
    )
    return ReleaseDeletionResponse(True, release=release)


def archive_release(release, user):
    """First step of a deletion, the release can still be restored."""
    return _set_archived(release, user, True)


def restore_release(release, user):
    return _set_archived(release, user, False)


def delete_release(release, user):
    with transaction.atomic():
        release = Release.objects.select_for_update().get(pk=release.pk)

        failure = _check_release(release, user)
        if failure is not None:
            return failure

        if not release.archived:
            return ReleaseDeletionResponse(
                False, ReleaseDeletionResponse.FAILED_REASON_NOT_ARCHIVED
            )

        release_id = release.pk
        release.delete()

    logger.info(f"Release ({release_id}) deleted by user ({user.id})")
    return ReleaseDeletionResponse(True)
