# Путь: backend/accounts/serializers.py
# Назначение: Сериализаторы входящих данных аутентификации (вход, регистрация, восстановление и смена пароля,
#             проверка ключа подтверждения).
# Проверки идут в фиксированном порядке и поднимают backend.errors.* с кодом из constants:
#   поля проверяются в validate_<поле> в порядке объявления, связанные поля и обращения к БД в validate().
# Поле пароля во входящих данных называется "pass" (ключевое слово Python), поэтому добавляется в get_fields().

import re

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import validate_email
from rest_framework import serializers
from rest_framework.fields import empty

from backend.errors import (
    AuthenticationError,
    AuthorizationError,
    BadParamsError,
    InputError,
    constants,
)

from .models import (
    RECALL_KEY_LENGTH,
    REGISTRATION_KEY_LENGTH,
    Counter,
    UserConfirm,
    UserLookupError,
    default_user_settings,
)

User = get_user_model()

# Латинская буква в начале, латинская буква или цифра в конце, всего от 3 до 15 символов из [.\w-]
LOGIN_RE = re.compile(r"[A-Za-z][.\w-]{1,13}[A-Za-z0-9]", re.ASCII)
RESERVED_LOGINS = {"anonymous"}


def is_login_allowed(login: str) -> bool:
    return login not in RESERVED_LOGINS and LOGIN_RE.fullmatch(login) is not None


def is_email_valid(email: str) -> bool:
    try:
        validate_email(email)
    except DjangoValidationError:
        return False
    return True


class TextField(serializers.CharField):
    """
    Строковое поле запроса без преобразований: пробелы не обрезаются,
    отсутствующее значение и всё, что не строка, считается пустой строкой.
    Решение "пусто → ошибка" принимает сериализатор, чтобы вернуть свой код.
    """

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        super().__init__(**kwargs)

    def run_validation(self, data=empty):
        return data if isinstance(data, str) else ""


class PassFieldMixin:
    """Добавляет поле "pass" (в validated_data попадает как password)."""

    def get_fields(self):
        fields = super().get_fields()
        fields["pass"] = TextField(source="password")
        return fields


# ===== ВХОД =====

class LoginSerializer(PassFieldMixin, serializers.Serializer):
    """
    {"login": "<логин или e-mail>", "pass": "<пароль>"} → validated_data["user"].
    Неизвестный пользователь и неверный пароль дают один и тот же код AUTHENTICATION_DOESNT_MATCH.
    """
    login = TextField()

    def validate_login(self, value):
        if not value:
            raise InputError(constants.INPUT_LOGIN_REQUIRED)
        return value

    def validate(self, attrs):
        if not attrs["password"]:
            raise InputError(constants.INPUT_PASS_REQUIRED)

        try:
            attrs["user"] = User.objects.get_authenticated(attrs["login"], attrs["password"])
        except UserLookupError as err:
            if err.code in (constants.NOT_FOUND_USER, constants.AUTHENTICATION_PASS_WRONG):
                raise AuthenticationError(constants.AUTHENTICATION_DOESNT_MATCH)
            raise AuthenticationError(err.code)
        return attrs


# ===== РЕГИСТРАЦИЯ =====

class RegisterSerializer(PassFieldMixin, serializers.Serializer):
    """
    Регистрация: {"login", "email", "pass", "pass2"}.
    create() сохраняет неактивного пользователя с новым cid; ключ и письмо остаются на вьюхе.
    """
    login = TextField()
    email = TextField()
    pass2 = TextField()

    def validate_login(self, value):
        if not value:
            raise InputError(constants.INPUT_LOGIN_REQUIRED)
        if not is_login_allowed(value):
            raise AuthenticationError(constants.INPUT_LOGIN_CONSTRAINT)
        return value

    def validate_email(self, value):
        if not value:
            raise InputError(constants.INPUT_EMAIL_REQUIRED)
        email = value.lower()
        if not is_email_valid(email):
            raise InputError(constants.MAIL_WRONG)
        return email

    def validate(self, attrs):
        if not attrs["password"]:
            raise InputError(constants.INPUT_PASS_REQUIRED)
        if attrs["password"] != attrs["pass2"]:
            raise AuthenticationError(constants.AUTHENTICATION_PASSWORDS_DONT_MATCH)

        existing = (
            User.objects.filter(username__iexact=attrs["login"]).first()
            or User.objects.filter(email=attrs["email"]).first()
        )
        if existing:
            if existing.email == attrs["email"]:
                raise AuthenticationError(constants.AUTHENTICATION_EMAIL_EXISTS)
            raise AuthenticationError(constants.AUTHENTICATION_USER_EXISTS)
        return attrs

    def create(self, validated_data):
        login = validated_data["login"]
        user = User(
            username=login,
            email=validated_data["email"],
            disp=login,
            cid=Counter.increment("user"),
            settings=default_user_settings(),
            is_active=False,
        )
        user.set_password(validated_data["password"])
        user.save()
        return user


# ===== ВОССТАНОВЛЕНИЕ ПАРОЛЯ =====

class RecallSerializer(serializers.Serializer):
    """
    {"login": "<логин или e-mail>"} → validated_data["user"].
    Залогиненный пользователь (не админ) может запросить восстановление только для себя.
    Логин сравнивается точно, e-mail в нижнем регистре.
    """
    login = TextField()

    def validate_login(self, value):
        if not value:
            raise InputError(constants.INPUT_LOGIN_REQUIRED)
        return value

    def validate(self, attrs):
        login = attrs["login"]
        i_am = self.context["request"].user
        if i_am.is_authenticated and i_am.username != login and not i_am.is_admin:
            raise AuthorizationError()

        user = User.objects.find_by_login_or_email(login, exact_login=True)
        if user is None:
            raise AuthenticationError(constants.NOT_FOUND_USER)
        attrs["user"] = user
        return attrs


class PassChangeRecallSerializer(PassFieldMixin, serializers.Serializer):
    """{"key": "<8 символов>", "pass", "pass2"} → validated_data["confirm"] (действующий ключ с пользователем)."""
    key = TextField()
    pass2 = TextField()

    def validate_key(self, value):
        if len(value) != RECALL_KEY_LENGTH:
            raise BadParamsError()
        return value

    def validate(self, attrs):
        if not attrs["password"] or not attrs["pass2"]:
            raise InputError(constants.INPUT_PASS_REQUIRED)
        if attrs["password"] != attrs["pass2"]:
            raise AuthenticationError(constants.AUTHENTICATION_PASSWORDS_DONT_MATCH)

        confirm = UserConfirm.objects.find(attrs["key"])
        if confirm is None or confirm.user is None:
            raise AuthenticationError(constants.AUTHENTICATION_PASSCHANGE)
        attrs["confirm"] = confirm
        return attrs


class PassChangeSerializer(PassFieldMixin, serializers.Serializer):
    """Смена пароля из настроек: {"login", "pass", "passNew", "passNew2"}; login должен быть своим."""
    login = TextField()
    passNew = TextField()
    passNew2 = TextField()

    def validate_login(self, value):
        i_am = self.context["request"].user
        if not i_am.is_authenticated or i_am.username != value:
            raise AuthorizationError()
        return value

    def validate(self, attrs):
        if not attrs["password"] or not attrs["passNew"] or not attrs["passNew2"]:
            raise InputError(constants.INPUT_PASS_REQUIRED)
        if attrs["passNew"] != attrs["passNew2"]:
            raise AuthenticationError(constants.AUTHENTICATION_PASSWORDS_DONT_MATCH)
        if not self.context["request"].user.check_password(attrs["password"]):
            raise AuthenticationError(constants.AUTHENTICATION_CURRPASS_WRONG)
        return attrs


# ===== ПОДТВЕРЖДЕНИЕ КЛЮЧА =====

class CheckConfirmSerializer(serializers.Serializer):
    key = TextField()

    def validate_key(self, value):
        if not REGISTRATION_KEY_LENGTH <= len(value) <= RECALL_KEY_LENGTH:
            raise BadParamsError()
        return value

    def validate(self, attrs):
        confirm = UserConfirm.objects.find(attrs["key"])
        if confirm is None or confirm.user is None:
            raise BadParamsError(constants.AUTHENTICATION_KEY_DOESNT_EXISTS)
        attrs["confirm"] = confirm
        return attrs
