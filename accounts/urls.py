# Путь: backend/accounts/urls.py
# Назначение: URL-ы аутентификации фотоархива.
# Подключается в корневом urls.py под префиксом /api/auth/:
#       path("api/auth/", include("accounts.urls"))
# Итоговые пути:
#   POST /api/auth/login/               → LoginView
#   POST /api/auth/logout/              → LogoutView
#   POST /api/auth/register/            → RegisterView
#   POST /api/auth/recall/              → RecallView
#   POST /api/auth/pass-change-recall/  → PassChangeRecallView
#   POST /api/auth/pass-change/         → PassChangeView
#   POST /api/auth/check-confirm/       → CheckConfirmView
#   GET  /api/auth/whoami/              → WhoAmIView
#   POST /api/auth/refresh/             → обновление JWT (SimpleJWT)

from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    LoginView,
    LogoutView,
    RegisterView,
    RecallView,
    PassChangeRecallView,
    PassChangeView,
    CheckConfirmView,
    WhoAmIView,
)

app_name = "accounts"

urlpatterns = [
    # ===== Вход / выход =====
    path("login/", LoginView.as_view(), name="login"),
    path("logout/", LogoutView.as_view(), name="logout"),
    path("refresh/", TokenRefreshView.as_view(), name="refresh"),
    path("whoami/", WhoAmIView.as_view(), name="whoami"),

    # ===== Регистрация и подтверждение =====
    path("register/", RegisterView.as_view(), name="register"),
    path("check-confirm/", CheckConfirmView.as_view(), name="check_confirm"),

    # ===== Пароль =====
    path("recall/", RecallView.as_view(), name="recall"),
    path("pass-change-recall/", PassChangeRecallView.as_view(), name="pass_change_recall"),
    path("pass-change/", PassChangeView.as_view(), name="pass_change"),
]
