# Путь: backend/accounts/mail.py
# Назначение: Письма аутентификации (подтверждение регистрации, восстановление пароля).
#             Рендер Django-шаблонов emails/*.html + emails/*.txt и отправка HTML+text через EmailMultiAlternatives.
# Шаблоны лежат в backend/templates/emails/.

import logging
from datetime import timedelta

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils import timezone
from django.utils.formats import date_format
from django.utils.timesince import timeuntil

logger = logging.getLogger(__name__)


def _project_name() -> str:
    return getattr(settings, "PROJECT_NAME", "PhotoArchive")


def confirm_link(key: str) -> str:
    """Ссылка на страницу фронтенда, которая проверит ключ через /api/auth/check-confirm/."""
    base = getattr(settings, "FRONTEND_BASE_URL", "http://localhost:3000").rstrip("/")
    return f"{base}/confirm/{key}"


def link_valid_text(now=None) -> str:
    """Например: «2 дня (до 21 октября 2026 г. 15:04)»."""
    now = now or timezone.now()
    ttl = getattr(settings, "CONFIRM_KEY_TTL", timedelta(days=2))
    expires = now + ttl
    return f"{timeuntil(expires, now)} (до {date_format(timezone.localtime(expires), 'DATETIME_FORMAT')})"


def send_html_mail(*, subject: str, to: list[str], html_template: str, context: dict,
                   text_template: str | None = None, bcc: list[str] | None = None,
                   from_email: str | None = None) -> None:
    """
    Унифицированная отправка HTML+text писем.
    Ошибки транспорта не глушим: вызывающий код решает, что с ними делать.
    """
    html_content = render_to_string(html_template, context)
    text_content = render_to_string(text_template, context) if text_template else "Пожалуйста, откройте письмо в HTML-формате."
    sender = from_email or getattr(settings, "DEFAULT_FROM_EMAIL", "noreply@localhost")

    msg = EmailMultiAlternatives(
        subject=subject,
        body=text_content,
        from_email=sender,
        to=to,
        bcc=[addr for addr in (bcc or []) if addr],
    )
    msg.attach_alternative(html_content, "text/html")
    msg.send(fail_silently=False)
    logger.info("Mail '%s' sent to %s", subject, ", ".join(to))


def send_registration_mail(user, confirm_key: str) -> None:
    ctx = {
        "project_name": _project_name(),
        "username": user.username,
        "login": user.username,
        "email": user.email,
        "confirm_key": confirm_key,
        "confirm_link": confirm_link(confirm_key),
        "greeting": f"Спасибо за регистрацию на проекте {_project_name()}!",
        "linkvalid": link_valid_text(),
    }
    send_html_mail(
        subject="Подтверждение регистрации",
        to=[user.email],
        bcc=[getattr(settings, "ADMIN_EMAIL", "")],
        html_template="emails/registration.html",
        text_template="emails/registration.txt",
        context=ctx,
    )


def send_recall_mail(user, confirm_key: str) -> None:
    ctx = {
        "project_name": _project_name(),
        "username": user.disp or user.username,
        "confirm_key": confirm_key,
        "confirm_link": confirm_link(confirm_key),
        "linkvalid": link_valid_text(),
    }
    send_html_mail(
        subject="Запрос на восстановление пароля",
        to=[user.email],
        html_template="emails/recall.html",
        text_template="emails/recall.txt",
        context=ctx,
    )
