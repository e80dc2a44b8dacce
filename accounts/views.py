# Путь: backend/accounts/views.py
# Назначение: Вьюхи аутентификации фотоархива: вход, выход, регистрация, запрос восстановления пароля,
#             смена пароля по ключу из письма, смена пароля из настроек, проверка ключа подтверждения, whoami.
# Все вьюхи публичные (AllowAny): права проверяются явно в сериализаторах (accounts/serializers.py).
# Ошибки поднимаются как backend.errors.* и превращаются в {"detail", "code"} обработчиком DRF.
#
# Ключи подтверждения (UserConfirm):
#   7 символов: подтверждение регистрации (checkConfirm активирует пользователя),
#   8 символов: смена пароля (checkConfirm только проверяет, passChangeRecall меняет пароль и удаляет ключ).

import logging
from smtplib import SMTPException

from django.contrib.auth import login as django_login, logout as django_logout, update_session_auth_hash
from django.db import transaction
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.tokens import RefreshToken

from backend.errors import AuthenticationError, constants

from . import mail
from .models import RECALL_KEY_LENGTH, REGISTRATION_KEY_LENGTH, UserConfirm
from .serializers import (
    CheckConfirmSerializer,
    LoginSerializer,
    PassChangeRecallSerializer,
    PassChangeSerializer,
    RecallSerializer,
    RegisterSerializer,
)

logger = logging.getLogger(__name__)

DEFAULT_AVATAR = "/img/caps/avatarth.png"
AVATAR_PREFIX = "/_a/h/"


def avatar_url(user) -> str:
    return AVATAR_PREFIX + user.avatar if user.avatar else DEFAULT_AVATAR


# ===== ВХОД / ВЫХОД =====

class LoginView(APIView):
    """
    POST /api/auth/login/
    Тело: {"login": "<логин или e-mail>", "pass": "<пароль>"}
    Создаёт сессию и возвращает youAre + JWT-пару (access/refresh).
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]

        django_login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        refresh = RefreshToken.for_user(user)
        logger.info("User %s logged in", user.username)

        return Response({
            "message": "Success login",
            "youAre": user.plain(),
            "access": str(refresh.access_token),
            "refresh": str(refresh),
        })


class LogoutView(APIView):
    """
    POST /api/auth/logout/
    Завершает текущую сессию.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        django_logout(request)
        return Response({})


# ===== РЕГИСТРАЦИЯ =====

class RegisterView(APIView):
    """
    POST /api/auth/register/
    Тело: {"login", "email", "pass", "pass2"}
    Создаёт неактивного пользователя и отправляет письмо с 7-символьным ключом подтверждения.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RegisterSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.save()

        try:
            confirm = UserConfirm.objects.issue(user, REGISTRATION_KEY_LENGTH)
            mail.send_registration_mail(user, confirm.key)
        except Exception:
            # Без письма пользователь не сможет подтвердить регистрацию, откатываем
            user.delete()
            logger.exception("Registration of %s failed after user was saved", user.username)
            raise AuthenticationError(constants.AUTHENTICATION_REGISTRATION)

        logger.info("User %s registered, confirmation sent to %s", user.username, user.email)
        return Response({
            "message": "Учетная запись создана успешно. Для завершения регистрации следуйте инструкциям, "
                       "отправленным на указанный вами e-mail",
        })


# ===== ВОССТАНОВЛЕНИЕ ПАРОЛЯ =====

class RecallView(APIView):
    """
    POST /api/auth/recall/
    Тело: {"login": "<логин или e-mail>"}
    Отправляет письмо с 8-символьным ключом смены пароля.
    Залогиненный пользователь может запросить восстановление только своей учётной записи (кроме админов).
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = RecallSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]

        with transaction.atomic():
            UserConfirm.objects.filter(user=user).delete()
            confirm = UserConfirm.objects.issue(user, RECALL_KEY_LENGTH)

        try:
            mail.send_recall_mail(user, confirm.key)
        except (SMTPException, OSError):
            # Ключ уже сохранён: ответ тот же, повторный запрос выдаст новый ключ
            logger.exception("Recall mail for %s was not sent", user.username)
        else:
            logger.info("Password recall requested for %s", user.username)

        return Response({
            "message": "Запрос успешно отправлен. Для продолжения процедуры следуйте инструкциям, "
                       "высланным на Ваш e-mail",
        })


class PassChangeRecallView(APIView):
    """
    POST /api/auth/pass-change-recall/
    Тело: {"key": "<8 символов>", "pass", "pass2"}
    Смена пароля по ключу из письма. Неактивный пользователь при этом активируется.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PassChangeRecallSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        confirm = serializer.validated_data["confirm"]

        user = confirm.user
        user.set_password(serializer.validated_data["password"])
        if not user.is_active:
            user.activate()

        with transaction.atomic():
            user.save()
            confirm.delete()

        # Если пароль меняет сам залогиненный пользователь, сессия должна остаться действительной
        if request.user.is_authenticated and request.user.pk == user.pk:
            update_session_auth_hash(request, user)

        logger.info("Password of %s changed by recall key", user.username)
        return Response({"message": "Новый пароль сохранен успешно"})


class PassChangeView(APIView):
    """
    POST /api/auth/pass-change/
    Тело: {"login", "pass", "passNew", "passNew2"}
    Смена пароля из настроек с вводом текущего пароля.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PassChangeSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)

        i_am = request.user
        i_am.set_password(serializer.validated_data["passNew"])
        i_am.save()
        update_session_auth_hash(request, i_am)

        return Response({"message": "Новый пароль установлен успешно"})


# ===== ПОДТВЕРЖДЕНИЕ КЛЮЧА =====

class CheckConfirmView(APIView):
    """
    POST /api/auth/check-confirm/
    Тело: {"key": "<7 или 8 символов>"}
    7 символов: подтверждает регистрацию; 8 символов: отдаёт данные для формы смены пароля.
    """
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CheckConfirmSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        confirm = serializer.validated_data["confirm"]
        user = confirm.user

        if confirm.purpose == UserConfirm.Purpose.REGISTRATION:
            user.activate()
            with transaction.atomic():
                user.save(update_fields=["is_active", "activatedate"])
                confirm.delete()
            logger.info("Registration of %s confirmed", user.username)

            return Response({
                "message": "Спасибо, регистрация подтверждена! Теперь вы можете войти в систему, "
                           "используя ваш логин и пароль",
                "type": "noty",
            })

        return Response({
            "message": "Pass change",
            "type": "authPassChange",
            "login": user.username,
            "disp": user.disp,
            "avatar": avatar_url(user),
        })


class WhoAmIView(APIView):
    """
    GET /api/auth/whoami/
    Текущий пользователь (или null для гостя) и флаг registered.
    """
    permission_classes = [AllowAny]

    def get(self, request):
        user = request.user
        registered = bool(user and user.is_authenticated)
        return Response({
            "user": user.plain() if registered else None,
            "registered": registered,
        })
