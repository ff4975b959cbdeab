import functools
import logging
from decimal import Decimal, ROUND_HALF_UP

from django.utils import timezone
from django.utils.text import Truncator

logger = logging.getLogger(__name__)

CENTS = Decimal('0.01')


def log_func(max_length=100):
    def _log_func(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            str_args = Truncator(args.__str__()).chars(max_length)
            str_kwargs = Truncator(kwargs.__str__()).chars(max_length)

            logger.info(
                "Start %s(args=%s, kwargs=%s)" % (func.__name__, str_args, str_kwargs)
            )
            value = func(*args, **kwargs)
            str_value = Truncator(value.__str__()).chars(max_length)

            logger.info("End %s with return value %s" % (func.__name__, str_value))
            return value

        return wrapper

    return _log_func


def parsed_django_request_string(django_request_string):
    cleaned_request_string = django_request_string[14:]
    method, request_url = cleaned_request_string.split()

    return {'method': method, 'request_url': request_url[1:-2]}


def to_cents(amount):
    """Converts a decimal amount of money to an integer amount of cents."""
    return int((Decimal(amount) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


def from_cents(cents):
    return (Decimal(cents) / 100).quantize(CENTS)


def current_month_year(now=None):
    now = now or timezone.now()
    return now.strftime('%Y-%m')
