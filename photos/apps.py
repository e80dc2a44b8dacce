# Путь: backend/photos/apps.py
# Назначение: Конфиг приложения photos (словарь полей фотографии для клиента).

from django.apps import AppConfig


class PhotosConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "photos"
    verbose_name = "Фотографии"
