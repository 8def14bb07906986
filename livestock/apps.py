from django.apps import AppConfig


class LivestockConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "livestock"

    def ready(self):
        """
        Import signals to register them when the app is ready.

        This keeps an animal's health status in step with its disease case outcomes.
        """
        import livestock.signals  # noqa: F401
