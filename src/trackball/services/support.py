import logging

from django.db import transaction

from trackball import tasks
from trackball.models import SupportTicket, TicketMessage
from trackball.services.notifications import enqueue

logger = logging.getLogger(__name__)


class TicketReplyResponse:
    FAILED_REASON_INVALID_STATUS = "invalid_status"

    def __init__(self, success, error_reason=None, ticket_message=None):
        self.success = success
        self.failure_reason = error_reason
        self.ticket_message = ticket_message


TICKET_STATUSES = frozenset(status for status, _ in SupportTicket.STATUS_CHOICES)


def create_ticket(user, subject, description, category=None, priority=None):
    with transaction.atomic():
        ticket = SupportTicket.objects.create(
            user=user,
            subject=subject,
            description=description,
            category=category,
            priority=priority or SupportTicket.PRIORITY_MEDIUM,
        )
        TicketMessage.objects.create(ticket=ticket, user=user, message=description)

    logger.info('Support ticket %s opened by user %s', ticket.pk, user.pk)
    return ticket


def add_user_message(ticket, user, message):
    with transaction.atomic():
        ticket_message = TicketMessage.objects.create(
            ticket=ticket, user=user, message=message
        )
        # Touches `updated` so the ticket moves up in the admin queue
        ticket.save(update_fields=['updated'])
    return ticket_message


def reply_to_ticket(ticket, admin, message, new_status=None, escalation_email=None):
    new_status = new_status or ticket.status
    if new_status not in TICKET_STATUSES:
        return TicketReplyResponse(False, TicketReplyResponse.FAILED_REASON_INVALID_STATUS)

    with transaction.atomic():
        ticket_message = TicketMessage.objects.create(
            ticket=ticket, user=admin, message=message, is_admin_reply=True
        )

        ticket.status = new_status
        update_fields = ['status', 'updated']
        if escalation_email and new_status == SupportTicket.STATUS_ESCALATED:
            ticket.escalation_email = escalation_email
            update_fields.append('escalation_email')
        ticket.save(update_fields=update_fields)

    logger.info(
        'Support ticket %s answered by %s, status %s', ticket.pk, admin.pk, new_status
    )
    enqueue(tasks.send_ticket_reply_email, ticket.pk, ticket_message.pk)

    return TicketReplyResponse(True, ticket_message=ticket_message)
