"""
Settings specific to local dev environment (docker)
"""
from .unified import *

DEBUG = True

# Plain console output in dev, no Logstash JSON and nothing posted to Slack
LOGGING['formatters']['dev'] = {
    'format': '[%(asctime)s] %(levelname)s - %(name)s.%(funcName)s(): %(message)s',
    'datefmt': '%H:%M:%S',
}
LOGGING['handlers']['console']['formatter'] = 'dev'
for name, logger_conf in LOGGING['loggers'].items():
    logger_conf['handlers'] = ['console']
    logger_conf['level'] = 'INFO' if name == 'api' else 'DEBUG'
LOGGING['root']['handlers'] = ['console']

EMAIL_BACKEND = 'django.core.mail.backends.console.EmailBackend'
CELERY_ALWAYS_EAGER = env.get_bool('CELERY_ALWAYS_EAGER', True)

REST_FRAMEWORK['DEFAULT_RENDERER_CLASSES'] += (
    'rest_framework.renderers.BrowsableAPIRenderer',
)
