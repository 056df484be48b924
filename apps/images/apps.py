from django.apps import AppConfig


class ImagesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.images"

    def ready(self) -> None:  # pragma: no cover - import side effects
        from . import signals  # noqa: F401
