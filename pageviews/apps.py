from django.apps import AppConfig


class PageviewsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'pageviews'
    verbose_name = 'Page Views'

    def ready(self):
        """Connect view collection signals once all models are loaded"""
        from . import signals
        signals.register_signals()
