from django.apps import AppConfig


class TrackballConfig(AppConfig):
    name = 'trackball'
    verbose_name = 'Trackball'
