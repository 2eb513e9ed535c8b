from django.apps import AppConfig


class CinemaConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'cinema'
    verbose_name = 'Cinema'
