import logging

from django.conf import settings
from django.core.mail import EmailMessage
from django.template.loader import render_to_string

logger = logging.getLogger(__name__)


RELEASE_STATUS_MESSAGES = {
    'approved': 'Your release has been approved and is being prepared for distribution!',
    'rejected': 'Your release has been rejected. Please review the feedback and resubmit.',
    'delivered': 'Your release is now live on streaming platforms!',
    'taken down': 'Your release has been taken down from streaming platforms.',
}
DEFAULT_RELEASE_STATUS_MESSAGE = 'Your release status has been updated.'


def dashboard_url():
    return '%s/dashboard' % settings.APP_URL.rstrip('/')


def send_html_mail(from_email, to_email, subject, template_name, context, cc=None):
    context = dict(context, dashboard_url=dashboard_url())
    msg = EmailMessage(
        subject=subject,
        body=render_to_string(template_name, context),
        from_email=from_email,
        to=[to_email],
        cc=cc,
    )
    msg.content_subtype = 'html'
    msg.send()
    logger.info('Sent %s to %s', template_name, to_email)


def send_release_status(release, status=None):
    status = status or release.status
    context = {
        'first_name': release.user.first_name,
        'release_title': release.title,
        'artist_name': release.artist_name,
        'status': status,
        'status_message': RELEASE_STATUS_MESSAGES.get(
            status, DEFAULT_RELEASE_STATUS_MESSAGE
        ),
        'rejection_reason': release.rejection_reason,
    }
    send_html_mail(
        settings.RELEASES_FROM_EMAIL,
        release.user.email,
        'Release %s: %s' % (status, release.title),
        'mails/release_status.html',
        context,
    )


def send_appeal_decision(appeal):
    approved = appeal.status == appeal.STATUS_APPROVED
    context = {
        'first_name': appeal.user.first_name,
        'decision': appeal.status,
        'approved': approved,
        'admin_notes': appeal.admin_notes,
    }
    send_html_mail(
        settings.SUPPORT_FROM_EMAIL,
        appeal.user.email,
        'Your account appeal has been %s' % appeal.status,
        'mails/appeal_decision.html',
        context,
    )


def send_ticket_reply(ticket, ticket_message):
    cc = None
    if ticket.status == ticket.STATUS_ESCALATED and ticket.escalation_email:
        cc = [ticket.escalation_email]

    context = {
        'first_name': ticket.user.first_name,
        'subject': ticket.subject,
        'status': ticket.get_status_display(),
        'message': ticket_message.message,
    }
    send_html_mail(
        settings.SUPPORT_FROM_EMAIL,
        ticket.user.email,
        'Re: %s' % ticket.subject,
        'mails/ticket_reply.html',
        context,
        cc=cc,
    )


def send_user_email(user, subject, message):
    send_html_mail(
        settings.DEFAULT_FROM_EMAIL,
        user.email,
        subject,
        'mails/user_email.html',
        {'first_name': user.first_name, 'subject': subject, 'message': message},
    )


def send_track_allowance_granted(user, tracks_allowed):
    send_html_mail(
        settings.DEFAULT_FROM_EMAIL,
        user.email,
        'Track Allowance Subscription Granted - My Trackball',
        'mails/track_allowance_granted.html',
        {'first_name': user.first_name, 'tracks_allowed': tracks_allowed},
    )
