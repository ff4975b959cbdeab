import json
import logging
import socket

import requests
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from logstash import LogstashFormatterVersion1

from trackball.utils import parsed_django_request_string


class SlackHandler(logging.Handler):
    """Posts records to the errors channel webhook, when one is configured."""

    RED = '#d50200'
    ORANGE = '#de9e31'
    GREY = '#9e9e9e'

    def emit(self, record):
        webhook_url = settings.SLACK_WEBHOOK_URL_ERRORS
        if not webhook_url:
            return

        try:
            requests.post(webhook_url, json=self.build_payload(record), timeout=5)
        except requests.RequestException:
            self.handleError(record)

    def build_payload(self, record):
        if record.levelno >= logging.ERROR:
            color = self.RED
        elif record.levelno >= logging.WARNING:
            color = self.ORANGE
        else:
            color = self.GREY

        return {
            'attachments': [
                {
                    'color': color,
                    'fallback': record.getMessage(),
                    'text': '```%s```' % self.format(record),
                    'footer': '%s · %s · %s'
                    % (record.levelname, record.name, socket.gethostname()),
                    'mrkdwn_in': ['text'],
                }
            ]
        }


class TrackballLogFormatter(LogstashFormatterVersion1):
    @classmethod
    def serialize(cls, message):
        message['@version'] = '1.1'
        # django.request puts "<WSGIRequest: GET '/api/...'>" in the record
        if message.get('logger_name') == 'django.request' and 'request' in message:
            message.update(parsed_django_request_string(message.pop('request')))
        return json.dumps(message, cls=DjangoJSONEncoder)


class TrackballStreamHandler(logging.StreamHandler):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.setFormatter(TrackballLogFormatter())
