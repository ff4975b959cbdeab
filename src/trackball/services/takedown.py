import logging

from django.db import transaction

from releases.models import Release
from trackball.services.notifications import notify_user
from users.models import Notification

logger = logging.getLogger(__name__)


class TakedownResponse:
    FAILED_REASON_NOT_OWNER = "not_owner"
    FAILED_REASON_NOT_LIVE = "not_live"
    FAILED_REASON_TAKEDOWN_IN_PROGRESS = "takedown_in_progress"
    FAILED_REASON_NO_TAKEDOWN_REQUESTED = "no_takedown_requested"

    def __init__(self, success, error_reason=None):
        self.success = success
        self.failure_reason = error_reason


def request_takedown(release, user):
    with transaction.atomic():
        release = Release.objects.select_for_update().get(pk=release.pk)

        if release.user_id != user.pk:
            return TakedownResponse(False, TakedownResponse.FAILED_REASON_NOT_OWNER)

        # Can only take down live releases
        if release.status != Release.STATUS_APPROVED:
            return TakedownResponse(False, TakedownResponse.FAILED_REASON_NOT_LIVE)

        if release.takedown_requested:
            return TakedownResponse(
                False, TakedownResponse.FAILED_REASON_TAKEDOWN_IN_PROGRESS
            )

        release.takedown_requested = True
        release.save(update_fields=['takedown_requested', 'updated'])

    logger.info(f"Takedown of release ({release.id}) requested by user ({user.id})")
    return TakedownResponse(True)


def process_takedown(release, approved, admin_notes=None):
    with transaction.atomic():
        release = Release.objects.select_for_update().get(pk=release.pk)

        if not release.takedown_requested:
            return TakedownResponse(
                False, TakedownResponse.FAILED_REASON_NO_TAKEDOWN_REQUESTED
            )

        release.takedown_requested = False
        update_fields = ['takedown_requested', 'updated']

        if approved:
            release.status = Release.STATUS_TAKEN_DOWN
            update_fields.append('status')
        elif admin_notes:
            release.notes = (release.notes or '') + '\n\nAdmin note: ' + admin_notes
            update_fields.append('notes')

        release.save(update_fields=update_fields)

        if approved:
            notify_user(
                release.user,
                'Takedown Request Approved',
                'Your takedown request for "%s" has been processed. '
                'The release has been taken down.' % release.title,
                Notification.TYPE_SUCCESS,
            )
        else:
            notify_user(
                release.user,
                'Takedown Request Denied',
                'Your takedown request for "%s" has been denied. %s'
                % (release.title, admin_notes or 'Contact support for more information.'),
                Notification.TYPE_WARNING,
            )

    logger.info(
        f"Takedown of release ({release.id}) {'approved' if approved else 'denied'}"
    )
    return TakedownResponse(True)
