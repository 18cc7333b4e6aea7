from django.apps import AppConfig


class ChurchesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.churches'
    verbose_name = 'Churches'

    def ready(self):
        import apps.churches.resources  # noqa: F401
