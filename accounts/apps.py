# Путь: backend/accounts/apps.py
# Назначение: Конфиг приложения аутентификации.

from django.apps import AppConfig


class AccountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "accounts"
    verbose_name = "Пользователи и аутентификация"
