# Путь: backend/accounts/models.py
# Назначение: Пользователь фотоархива (логин, e-mail, роль, активация, защита от перебора паролей),
#             одноразовые ключи подтверждения (регистрация / смена пароля) и счётчик публичных id.
# Ключи подтверждения:
#   7 символов: подтверждение регистрации,
#   8 символов: подтверждение смены пароля.
#   Ключ живёт CONFIRM_KEY_TTL (по умолчанию 2 дня) и удаляется после использования.

from datetime import timedelta

from django.conf import settings
from django.contrib.auth.models import AbstractUser, UserManager
from django.db import models, transaction
from django.db.models import F, Q
from django.utils import timezone
from django.utils.crypto import get_random_string

from backend.errors import constants

REGISTRATION_KEY_LENGTH = 7
RECALL_KEY_LENGTH = 8

DEFAULT_USER_SETTINGS = {
    "subscr_auto_reply": True,
}


def default_user_settings():
    return dict(DEFAULT_USER_SETTINGS)


class UserLookupError(Exception):
    """Ошибка поиска/проверки пользователя при входе. Код: одна из констант backend.errors.constants."""

    def __init__(self, code):
        super().__init__(code)
        self.code = code


class Counter(models.Model):
    """Именованная последовательность (например, для публичного номера пользователя cid)."""
    name = models.CharField("Имя", max_length=64, unique=True)
    next = models.PositiveBigIntegerField("Следующее значение", default=0)

    class Meta:
        verbose_name = "Счётчик"
        verbose_name_plural = "Счётчики"

    @classmethod
    def increment(cls, name: str) -> int:
        """Атомарно увеличивает счётчик и возвращает новое значение."""
        with transaction.atomic():
            counter, _ = cls.objects.select_for_update().get_or_create(name=name)
            cls.objects.filter(pk=counter.pk).update(next=F("next") + 1)
            counter.refresh_from_db(fields=["next"])
            return counter.next

    def __str__(self):
        return f"{self.name}: {self.next}"


class AccountManager(UserManager):

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("is_active", True)
        extra_fields.setdefault("role", self.model.Roles.SUPERADMIN)
        return super().create_superuser(username, email, password, **extra_fields)

    def find_by_login_or_email(self, login: str, *, exact_login: bool = False):
        login_q = Q(username=login) if exact_login else Q(username__iexact=login)
        return self.filter(login_q | Q(email=login.lower())).first()

    def get_authenticated(self, login: str, password: str):
        """
        Находит пользователя по логину (без учёта регистра) или e-mail и проверяет пароль.
        Неверный пароль увеличивает счётчик попыток; по достижении AUTH_MAX_LOGIN_ATTEMPTS
        учётная запись блокируется на AUTH_LOCK_TIME.
        """
        user = self.find_by_login_or_email(login)
        if user is None:
            raise UserLookupError(constants.NOT_FOUND_USER)

        if not user.is_active:
            raise UserLookupError(constants.AUTHENTICATION_NOT_ALLOWED)

        if user.is_locked:
            raise UserLookupError(constants.AUTHENTICATION_MAX_ATTEMPTS)

        if not user.check_password(password):
            user.register_failed_login()
            raise UserLookupError(constants.AUTHENTICATION_PASS_WRONG)

        if user.login_attempts or user.lock_until:
            user.login_attempts = 0
            user.lock_until = None
            user.save(update_fields=["login_attempts", "lock_until"])
        return user


class User(AbstractUser):
    class Roles(models.IntegerChoices):
        USER = 0, "Пользователь"
        MODERATOR = 5, "Модератор"
        ADMIN = 10, "Администратор"
        SUPERADMIN = 11, "Суперадминистратор"

    email = models.EmailField("E-mail", unique=True)
    is_active = models.BooleanField("Активен", default=False)
    cid = models.PositiveBigIntegerField("Публичный номер", unique=True, null=True, blank=True)
    disp = models.CharField("Отображаемое имя", max_length=150, blank=True, default="")
    role = models.PositiveSmallIntegerField("Роль", choices=Roles.choices, default=Roles.USER)
    avatar = models.CharField("Аватар", max_length=255, blank=True, default="")
    activatedate = models.DateTimeField("Дата активации", null=True, blank=True)
    settings = models.JSONField("Настройки", default=default_user_settings, blank=True)

    login_attempts = models.PositiveIntegerField("Неудачных попыток входа", default=0)
    lock_until = models.DateTimeField("Заблокирован до", null=True, blank=True)

    objects = AccountManager()

    REQUIRED_FIELDS = ["email"]

    class Meta:
        verbose_name = "Пользователь"
        verbose_name_plural = "Пользователи"

    @property
    def login(self):
        return self.username

    @property
    def is_admin(self):
        return self.is_superuser or self.role >= self.Roles.ADMIN

    @property
    def is_locked(self):
        return bool(self.lock_until and self.lock_until > timezone.now())

    def activate(self):
        self.is_active = True
        self.activatedate = timezone.now()

    def register_failed_login(self):
        max_attempts = getattr(settings, "AUTH_MAX_LOGIN_ATTEMPTS", 10)
        lock_time = getattr(settings, "AUTH_LOCK_TIME", timedelta(hours=2))

        self.login_attempts += 1
        if self.login_attempts >= max_attempts:
            # счётчик начинается заново после блокировки
            self.login_attempts = 0
            self.lock_until = timezone.now() + lock_time
        self.save(update_fields=["login_attempts", "lock_until"])

    def plain(self) -> dict:
        """Публичное представление пользователя для клиента (youAre)."""
        return {
            "cid": self.cid,
            "login": self.username,
            "disp": self.disp or self.username,
            "email": self.email,
            "role": self.role,
            "avatar": self.avatar,
            "active": self.is_active,
            "settings": self.settings or {},
        }

    def __str__(self):
        return self.username


class UserConfirmQuerySet(models.QuerySet):

    def expired_before(self):
        ttl = getattr(settings, "CONFIRM_KEY_TTL", timedelta(days=2))
        return timezone.now() - ttl

    def alive(self):
        return self.filter(created__gt=self.expired_before())

    def expired(self):
        return self.filter(created__lte=self.expired_before())

    def issue(self, user, length: int):
        """Создаёт новый ключ указанной длины, не совпадающий с существующими."""
        key = get_random_string(length)
        while self.filter(key=key).exists():
            key = get_random_string(length)
        return self.create(key=key, user=user)

    def find(self, key: str):
        """Действующий ключ вместе с пользователем либо None."""
        return self.alive().select_related("user").filter(key=key).first()


class UserConfirm(models.Model):
    class Purpose(models.TextChoices):
        REGISTRATION = "registration", "Подтверждение регистрации"
        RECALL = "recall", "Смена пароля"

    key = models.CharField("Ключ", max_length=8, unique=True)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="confirms",
        verbose_name="Пользователь",
    )
    created = models.DateTimeField("Создан", default=timezone.now, db_index=True)

    objects = UserConfirmQuerySet.as_manager()

    class Meta:
        verbose_name = "Ключ подтверждения"
        verbose_name_plural = "Ключи подтверждения"
        ordering = ["-created"]

    @property
    def purpose(self):
        if len(self.key) == REGISTRATION_KEY_LENGTH:
            return self.Purpose.REGISTRATION
        if len(self.key) == RECALL_KEY_LENGTH:
            return self.Purpose.RECALL
        return None

    @property
    def is_expired(self):
        ttl = getattr(settings, "CONFIRM_KEY_TTL", timedelta(days=2))
        return timezone.now() >= self.created + ttl

    def __str__(self):
        return f"{self.user} [{self.key}] {self.purpose or '?'}"
