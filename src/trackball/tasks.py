from celery.utils.log import get_task_logger

from trackball import mails
from trackball.celery import app
from trackball.models import SupportTicket, TicketMessage
from releases.models import Release
from users.models import AccountAppeal, User

logger = get_task_logger(__name__)


@app.task(bind=True)
def send_release_status_email(self, release_id, status):
    try:
        release = Release.objects.select_related('user').get(pk=release_id)
    except Release.DoesNotExist:
        logger.warning('Release %s gone before status email was sent', release_id)
        return

    try:
        mails.send_release_status(release, status)
    except Exception:
        logger.exception(
            'Failed to send release status email for release %s', release_id
        )
        raise


@app.task(bind=True)
def send_appeal_decision_email(self, appeal_id):
    try:
        appeal = AccountAppeal.objects.select_related('user').get(pk=appeal_id)
        mails.send_appeal_decision(appeal)
    except AccountAppeal.DoesNotExist as e:
        logger.exception(e)
    except Exception:
        logger.exception('Failed to send appeal decision for appeal %s', appeal_id)
        raise


@app.task(bind=True)
def send_ticket_reply_email(self, ticket_id, ticket_message_id):
    try:
        ticket = SupportTicket.objects.select_related('user').get(pk=ticket_id)
        ticket_message = TicketMessage.objects.get(pk=ticket_message_id)
        mails.send_ticket_reply(ticket, ticket_message)
    except (SupportTicket.DoesNotExist, TicketMessage.DoesNotExist) as e:
        logger.exception(e)
    except Exception:
        logger.exception('Failed to send reply email for ticket %s', ticket_id)
        raise


@app.task(bind=True)
def send_user_email(self, user_id, subject, message):
    try:
        user = User.objects.get(pk=user_id)
        mails.send_user_email(user, subject, message)
    except User.DoesNotExist as e:
        logger.exception(e)
    except Exception:
        logger.exception('Failed to send email to user %s', user_id)
        raise


@app.task(bind=True)
def send_track_allowance_email(self, user_id, tracks_allowed):
    try:
        user = User.objects.get(pk=user_id)
        mails.send_track_allowance_granted(user, tracks_allowed)
    except User.DoesNotExist as e:
        logger.exception(e)
    except Exception:
        logger.exception('Failed to send track allowance email to user %s', user_id)
        raise
