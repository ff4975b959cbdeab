import logging

from trackball.db.decorators import field_observer
from releases.models import Release, ReleaseStatusChange


logger = logging.getLogger(__name__)


@field_observer(sender=Release, field='status')
def release_status_changed(sender, instance, old_value, new_value, **kwargs):
    logger.info(
        "(Signal) Release.%d went from %s to %s" % (instance.id, old_value, new_value)
    )
    ReleaseStatusChange.objects.create(
        release=instance, old_status=old_value, new_status=new_value
    )
