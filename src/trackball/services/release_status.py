import logging

from releases.models import Release
from trackball import tasks
from trackball.services.notifications import enqueue

logger = logging.getLogger(__name__)


class ReleaseStatusResponse:
    FAILED_REASON_NOT_FOUND = "not_found"
    FAILED_REASON_INVALID_STATUS = "invalid_status"
    FAILED_REASON_INVALID_PAYMENT_STATUS = "invalid_payment_status"
    FAILED_REASON_STATUS_UNCHANGED = "status_unchanged"
    FAILED_REASON_NOTHING_TO_UPDATE = "nothing_to_update"

    def __init__(self, success, error_reason=None, release=None):
        self.success = success
        self.failure_reason = error_reason
        self.release = release


def update_release_status(
    release_id, new_status=None, payment_status=None, rejection_reason=None
):
    """
    Moves a release to `new_status` and tells the owner about it by e-mail.

    Every status can be reached from every other status. Only unknown values
    and writes that would not change anything are refused. The e-mail is
    queued after the write and its failure never undoes the write.
    """
    try:
        release = Release.objects.select_related('user').get(pk=release_id)
    except Release.DoesNotExist:
        return ReleaseStatusResponse(False, ReleaseStatusResponse.FAILED_REASON_NOT_FOUND)

    if new_status is None and payment_status is None:
        return ReleaseStatusResponse(
            False, ReleaseStatusResponse.FAILED_REASON_NOTHING_TO_UPDATE, release
        )

    if new_status is not None and new_status not in Release.STATUS_SET:
        return ReleaseStatusResponse(
            False, ReleaseStatusResponse.FAILED_REASON_INVALID_STATUS, release
        )

    if payment_status is not None and payment_status not in Release.PAYMENT_STATUS_SET:
        return ReleaseStatusResponse(
            False, ReleaseStatusResponse.FAILED_REASON_INVALID_PAYMENT_STATUS, release
        )

    status_changed = new_status is not None and new_status != release.status

    if new_status is not None and not status_changed and payment_status is None:
        return ReleaseStatusResponse(
            False, ReleaseStatusResponse.FAILED_REASON_STATUS_UNCHANGED, release
        )

    update_fields = ['updated']
    if status_changed:
        release.status = new_status
        update_fields.append('status')
    if payment_status is not None:
        release.payment_status = payment_status
        update_fields.append('payment_status')
    if rejection_reason is not None:
        release.rejection_reason = rejection_reason
        update_fields.append('rejection_reason')

    release.save(update_fields=update_fields)
    logger.info(
        'Release %s updated: status=%s payment_status=%s',
        release.pk,
        release.status,
        release.payment_status,
    )

    if status_changed and release.user.email:
        enqueue(tasks.send_release_status_email, release.pk, release.status)

    return ReleaseStatusResponse(True, release=release)
