import logging

from users.models import Notification

logger = logging.getLogger(__name__)


def notify_user(user, title, message, type=Notification.TYPE_INFO):
    notification = Notification.objects.create(
        user=user, title=title, message=message, type=type
    )
    logger.info('Notification %s "%s" created for user %s', notification.pk, title, user.pk)
    return notification


def enqueue(task, *args):
    """
    Queues an advisory task. A broker failure is logged and never reaches the
    caller, the write that triggered the task stays committed.
    """
    try:
        task.delay(*args)
    except Exception:
        logger.exception('Failed to enqueue %s with args %s', task.name, args)
        return False
    return True


def mark_all_read(user):
    return Notification.objects.filter(user=user).unread().update(is_read=True)
