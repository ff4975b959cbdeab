import logging

from django.db import transaction
from django.utils import timezone

from trackball import tasks
from trackball.services.notifications import enqueue
from users.models import AccountAppeal

logger = logging.getLogger(__name__)


class AppealResponse:
    FAILED_REASON_NOT_RESTRICTED = "not_restricted"
    FAILED_REASON_APPEAL_PENDING = "appeal_pending"
    FAILED_REASON_INVALID_DECISION = "invalid_decision"
    FAILED_REASON_ALREADY_REVIEWED = "already_reviewed"

    def __init__(self, success, error_reason=None, appeal=None):
        self.success = success
        self.failure_reason = error_reason
        self.appeal = appeal


def submit_appeal(user, message):
    if not (user.is_banned or user.is_currently_locked):
        return AppealResponse(False, AppealResponse.FAILED_REASON_NOT_RESTRICTED)

    if user.appeals.filter(status=AccountAppeal.STATUS_PENDING).exists():
        return AppealResponse(False, AppealResponse.FAILED_REASON_APPEAL_PENDING)

    appeal = AccountAppeal.objects.create(user=user, message=message)
    logger.info('Appeal %s submitted by user %s', appeal.pk, user.pk)
    return AppealResponse(True, appeal=appeal)


def review_appeal(appeal, decision, reviewer, admin_notes=None):
    if decision not in AccountAppeal.DECISIONS:
        return AppealResponse(False, AppealResponse.FAILED_REASON_INVALID_DECISION)

    with transaction.atomic():
        appeal = AccountAppeal.objects.select_for_update().get(pk=appeal.pk)

        if appeal.status != AccountAppeal.STATUS_PENDING:
            return AppealResponse(
                False, AppealResponse.FAILED_REASON_ALREADY_REVIEWED, appeal
            )

        appeal.status = decision
        appeal.admin_notes = admin_notes
        appeal.reviewed_by = reviewer
        appeal.reviewed_at = timezone.now()
        appeal.save()

        if decision == AccountAppeal.STATUS_APPROVED:
            user = appeal.user
            user.is_banned = False
            user.save(update_fields=['is_banned', 'updated'])

    logger.info(
        'Appeal %s %s by %s', appeal.pk, decision, reviewer.pk if reviewer else None
    )
    enqueue(tasks.send_appeal_decision_email, appeal.pk)

    return AppealResponse(True, appeal=appeal)
