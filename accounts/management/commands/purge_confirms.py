# Путь: backend/accounts/management/commands/purge_confirms.py
# Назначение: Удаляет просроченные ключи подтверждения (регистрация / смена пароля).
# Запускать по крону, например раз в час:
#   python manage.py purge_confirms
#   python manage.py purge_confirms --dry-run

import logging

from django.core.management.base import BaseCommand

from accounts.models import UserConfirm

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Удаляет ключи подтверждения, срок действия которых истёк (CONFIRM_KEY_TTL)."

    def add_arguments(self, parser):
        parser.add_argument("--dry-run", action="store_true", help="Только показать количество, ничего не удалять")

    def handle(self, *args, **options):
        expired = UserConfirm.objects.expired()
        total = expired.count()

        if options["dry_run"]:
            self.stdout.write(f"Просроченных ключей: {total}")
            return

        expired.delete()
        logger.info("Purged %s expired confirm keys", total)
        self.stdout.write(self.style.SUCCESS(f"✓ Удалено ключей: {total}"))
