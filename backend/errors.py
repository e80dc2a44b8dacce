# Путь: backend/errors.py
# Назначение: Плоский набор типизированных ошибок API (ввод, аутентификация, авторизация, параметры)
#             и обработчик исключений DRF, который отдаёт {"detail": <сообщение>, "code": <код>}.
# Подключение в settings.py:
#   REST_FRAMEWORK = {"EXCEPTION_HANDLER": "backend.errors.exception_handler", ...}

import logging

from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger(__name__)


class constants:
    """Коды ошибок. Значение кода совпадает с его именем."""

    INPUT_LOGIN_REQUIRED = "INPUT_LOGIN_REQUIRED"
    INPUT_PASS_REQUIRED = "INPUT_PASS_REQUIRED"
    INPUT_EMAIL_REQUIRED = "INPUT_EMAIL_REQUIRED"
    INPUT_LOGIN_CONSTRAINT = "INPUT_LOGIN_CONSTRAINT"
    MAIL_WRONG = "MAIL_WRONG"

    NOT_FOUND_USER = "NOT_FOUND_USER"
    AUTHENTICATION_PASS_WRONG = "AUTHENTICATION_PASS_WRONG"
    AUTHENTICATION_DOESNT_MATCH = "AUTHENTICATION_DOESNT_MATCH"
    AUTHENTICATION_MAX_ATTEMPTS = "AUTHENTICATION_MAX_ATTEMPTS"
    AUTHENTICATION_NOT_ALLOWED = "AUTHENTICATION_NOT_ALLOWED"
    AUTHENTICATION_PASSWORDS_DONT_MATCH = "AUTHENTICATION_PASSWORDS_DONT_MATCH"
    AUTHENTICATION_EMAIL_EXISTS = "AUTHENTICATION_EMAIL_EXISTS"
    AUTHENTICATION_USER_EXISTS = "AUTHENTICATION_USER_EXISTS"
    AUTHENTICATION_REGISTRATION = "AUTHENTICATION_REGISTRATION"
    AUTHENTICATION_PASSCHANGE = "AUTHENTICATION_PASSCHANGE"
    AUTHENTICATION_CURRPASS_WRONG = "AUTHENTICATION_CURRPASS_WRONG"
    AUTHENTICATION_KEY_DOESNT_EXISTS = "AUTHENTICATION_KEY_DOESNT_EXISTS"

    DENY = "DENY"
    BAD_PARAMS = "BAD_PARAMS"


MESSAGES = {
    constants.INPUT_LOGIN_REQUIRED: "Заполните имя пользователя",
    constants.INPUT_PASS_REQUIRED: "Заполните пароль",
    constants.INPUT_EMAIL_REQUIRED: "Заполните e-mail",
    constants.INPUT_LOGIN_CONSTRAINT: (
        "Имя пользователя должно содержать от 3 до 15 латинских символов и начинаться с буквы. "
        "В состав слова могут входить цифры, точка, подчеркивание и тире"
    ),
    constants.MAIL_WRONG: "Неверный формат e-mail",

    constants.NOT_FOUND_USER: "Пользователь не найден",
    constants.AUTHENTICATION_PASS_WRONG: "Неверный пароль",
    constants.AUTHENTICATION_DOESNT_MATCH: "Неверная пара имя пользователя - пароль",
    constants.AUTHENTICATION_MAX_ATTEMPTS: (
        "Превышено количество попыток входа. Учетная запись временно заблокирована, попробуйте позже"
    ),
    constants.AUTHENTICATION_NOT_ALLOWED: "Вход для этого пользователя запрещен или регистрация не подтверждена",
    constants.AUTHENTICATION_PASSWORDS_DONT_MATCH: "Пароли не совпадают",
    constants.AUTHENTICATION_EMAIL_EXISTS: "Пользователь с таким e-mail уже зарегистрирован",
    constants.AUTHENTICATION_USER_EXISTS: "Пользователь с таким именем уже зарегистрирован",
    constants.AUTHENTICATION_REGISTRATION: "Ошибка регистрации",
    constants.AUTHENTICATION_PASSCHANGE: "Ошибка смены пароля",
    constants.AUTHENTICATION_CURRPASS_WRONG: "Текущий пароль указан неверно",
    constants.AUTHENTICATION_KEY_DOESNT_EXISTS: "Переданного ключа не существует или срок его действия истек",

    constants.DENY: "Недостаточно прав",
    constants.BAD_PARAMS: "Неверные параметры запроса",
}


class AppError(APIException):
    """
    Базовая ошибка приложения: код из constants + сообщение из MESSAGES.
    Код доступен как .code, текст в .detail (стандартно для DRF).
    """
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = constants.BAD_PARAMS

    def __init__(self, code=None):
        self.code = code or self.default_code
        super().__init__(detail=MESSAGES.get(self.code, self.code), code=self.code)


class InputError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class AuthenticationError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_code = constants.AUTHENTICATION_DOESNT_MATCH


class AuthorizationError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_code = constants.DENY


class BadParamsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = constants.BAD_PARAMS


def exception_handler(exc, context):
    """
    Обёртка над стандартным обработчиком DRF.
    Для AppError отдаём плоское тело {"detail", "code"}, остальное как в DRF.
    """
    response = drf_exception_handler(exc, context)
    if response is None or not isinstance(exc, AppError):
        return response

    view = context.get("view")
    request = context.get("request")
    logger.info(
        "Request rejected by %s",
        view.__class__.__name__ if view is not None else "unknown view",
        extra={
            "error_code": exc.code,
            "user_id": getattr(getattr(request, "user", None), "pk", None),
        },
    )
    response.data = {"detail": str(exc.detail), "code": exc.code}
    return response
