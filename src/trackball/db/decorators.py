import functools

from django.db.models.signals import post_init, post_save

from .signals import model_changed


def _snapshot(instance, exclude=()):
    return {
        f.attname: getattr(instance, f.attname, None)
        for f in instance._meta.local_fields
        if f.name not in exclude
    }


def observable_fields(exclude=()):
    """
    Class decorator that sends `model_changed` once per changed field after
    a model instance is saved. Creation sends nothing.

    Values are compared against what the instance held when it was loaded,
    or at its previous save.
    """

    def decoration(cls):
        def get_updated_fields(self):
            current = _snapshot(self)
            return {
                name: {'was': old, 'new': current[name]}
                for name, old in self._loaded_values.items()
                if old != current[name]
            }

        def _post_init(sender, instance, **kwargs):
            instance._loaded_values = _snapshot(instance, exclude)

        def _post_save(sender, instance, created, **kwargs):
            changes = {} if created else instance.get_updated_fields()
            instance._loaded_values = _snapshot(instance, exclude)

            for name, change in changes.items():
                model_changed.send(
                    sender=sender,
                    instance=instance,
                    field=name,
                    old_value=change['was'],
                    new_value=change['new'],
                )

        cls.get_updated_fields = get_updated_fields
        post_init.connect(_post_init, sender=cls, weak=False)
        post_save.connect(_post_save, sender=cls, weak=False)
        return cls

    return decoration


def field_observer(sender, field):
    """Connects the decorated callback to changes of a single field."""

    def decorate(callback):
        @functools.wraps(callback)
        def receiver(sender, instance, field, old_value, new_value, **kwargs):
            if field == observed:
                callback(sender, instance, old_value, new_value, **kwargs)

        model_changed.connect(receiver, sender=sender, weak=False)
        return receiver

    observed = field
    return decorate
