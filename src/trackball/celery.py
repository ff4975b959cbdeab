from celery import Celery
from django.conf import settings


app = Celery('trackball', broker=settings.BROKER_URL, include=['trackball.tasks'])

app.config_from_object('django.conf:settings')

if __name__ == '__main__':
    app.start()
