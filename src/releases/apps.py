from django.apps import AppConfig


class ReleasesConfig(AppConfig):
    name = 'releases'
    verbose_name = 'Releases'

    def ready(self):
        from releases import signals  # noqa: F401
