from django.dispatch import Signal


# Sent with instance, field, old_value and new_value
_model_changed = Signal()

model_changed = _model_changed
