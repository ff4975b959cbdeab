import json
import logging
import re
from uuid import uuid4

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.timezone import now

logger = logging.getLogger('api')

MASK = '[Filtered]'
SENSITIVE_KEYS = re.compile(
    'token|secret|password|signature|authorization|payment_method|api_key', re.I
)
UNPREFIXED_HEADERS = ('CONTENT_TYPE', 'CONTENT_LENGTH')


def mask_sensitive(data):
    """
    Returns a copy of request or response data with credentials and payment
    references replaced, nested lists and dicts included.
    """
    if isinstance(data, list):
        return [mask_sensitive(item) for item in data]
    if not isinstance(data, dict):
        return data

    masked = {}
    for key, value in data.items():
        if SENSITIVE_KEYS.search(str(key)):
            masked[key] = MASK
        else:
            masked[key] = mask_sensitive(value)
    return masked


def request_headers(meta):
    headers = {}
    for key, value in meta.items():
        if key.startswith('HTTP_'):
            key = key[len('HTTP_') :]
        elif key not in UNPREFIXED_HEADERS:
            continue
        headers[key.replace('_', '-').title()] = value
    return headers


def to_json(data):
    return json.dumps(mask_sensitive(data), cls=DjangoJSONEncoder)


class LogMixin:
    """Logs every API request and response in one Logstash record."""

    def initial(self, request, *args, **kwargs):
        request.request_id = str(uuid4())
        request.time_initialized = now()
        super(LogMixin, self).initial(request, *args, **kwargs)

    def finalize_response(self, request, response, *args, **kwargs):
        response = super(LogMixin, self).finalize_response(
            request, response, *args, **kwargs
        )

        try:
            logger.info(msg='', extra=self.log_record(request, response))
        except Exception:
            logging.getLogger(__name__).exception('Unable to log current request')

        return response

    def log_record(self, request, response):
        user = getattr(request, 'user', None)
        started = getattr(request, 'time_initialized', None)
        finished = now()

        return {
            'view': self.__class__.__name__,
            'user_id': user.pk if user and user.is_authenticated else None,
            'uri': request.path,
            'method': request.method,
            'http_status': response.status_code,
            'user_agent': request.META.get('HTTP_USER_AGENT'),
            'query_params': to_json(request.query_params.dict()),
            'request': to_json(request.data),
            'response': to_json(getattr(response, 'data', None)),
            'duration_ms': None
            if started is None
            else int((finished - started).total_seconds() * 1000),
            'headers': to_json(request_headers(request.META)),
            'request_id': getattr(request, 'request_id', None),
        }
