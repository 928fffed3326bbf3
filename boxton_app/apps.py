from django.apps import AppConfig


class BoxtonAppConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'boxton_app'
    verbose_name = 'Boxton Layout'
