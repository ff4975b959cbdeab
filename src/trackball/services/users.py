import logging

from trackball import tasks
from trackball.services.notifications import enqueue

logger = logging.getLogger(__name__)


def ban_user(user):
    user.is_banned = True
    user.save(update_fields=['is_banned', 'updated'])
    logger.info('User %s banned', user.pk)


def unban_user(user):
    user.is_banned = False
    user.save(update_fields=['is_banned', 'updated'])
    logger.info('User %s unbanned', user.pk)


def reset_strikes(user):
    user.strike_count = 0
    user.save(update_fields=['strike_count', 'updated'])
    logger.info('Strikes of user %s reset', user.pk)


def send_email_to_user(user, subject, message):
    return enqueue(tasks.send_user_email, user.pk, subject, message)
