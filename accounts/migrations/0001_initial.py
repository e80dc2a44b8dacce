import accounts.models
import django.contrib.auth.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("auth", "0012_alter_user_first_name_max_length"),
    ]

    operations = [
        migrations.CreateModel(
            name="Counter",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=64, unique=True, verbose_name="Имя")),
                ("next", models.PositiveBigIntegerField(default=0, verbose_name="Следующее значение")),
            ],
            options={
                "verbose_name": "Счётчик",
                "verbose_name_plural": "Счётчики",
            },
        ),
        migrations.CreateModel(
            name="User",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("password", models.CharField(max_length=128, verbose_name="password")),
                ("last_login", models.DateTimeField(blank=True, null=True, verbose_name="last login")),
                ("is_superuser", models.BooleanField(
                    default=False,
                    help_text="Designates that this user has all permissions without explicitly assigning them.",
                    verbose_name="superuser status",
                )),
                ("username", models.CharField(
                    error_messages={"unique": "A user with that username already exists."},
                    help_text="Required. 150 characters or fewer. Letters, digits and @/./+/-/_ only.",
                    max_length=150,
                    unique=True,
                    validators=[django.contrib.auth.validators.UnicodeUsernameValidator()],
                    verbose_name="username",
                )),
                ("first_name", models.CharField(blank=True, max_length=150, verbose_name="first name")),
                ("last_name", models.CharField(blank=True, max_length=150, verbose_name="last name")),
                ("is_staff", models.BooleanField(
                    default=False,
                    help_text="Designates whether the user can log into this admin site.",
                    verbose_name="staff status",
                )),
                ("date_joined", models.DateTimeField(default=django.utils.timezone.now, verbose_name="date joined")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="E-mail")),
                ("is_active", models.BooleanField(default=False, verbose_name="Активен")),
                ("cid", models.PositiveBigIntegerField(blank=True, null=True, unique=True, verbose_name="Публичный номер")),
                ("disp", models.CharField(blank=True, default="", max_length=150, verbose_name="Отображаемое имя")),
                ("role", models.PositiveSmallIntegerField(
                    choices=[(0, "Пользователь"), (5, "Модератор"), (10, "Администратор"), (11, "Суперадминистратор")],
                    default=0,
                    verbose_name="Роль",
                )),
                ("avatar", models.CharField(blank=True, default="", max_length=255, verbose_name="Аватар")),
                ("activatedate", models.DateTimeField(blank=True, null=True, verbose_name="Дата активации")),
                ("settings", models.JSONField(blank=True, default=accounts.models.default_user_settings, verbose_name="Настройки")),
                ("login_attempts", models.PositiveIntegerField(default=0, verbose_name="Неудачных попыток входа")),
                ("lock_until", models.DateTimeField(blank=True, null=True, verbose_name="Заблокирован до")),
                ("groups", models.ManyToManyField(
                    blank=True,
                    help_text="The groups this user belongs to. A user will get all permissions granted to each of their groups.",
                    related_name="user_set",
                    related_query_name="user",
                    to="auth.group",
                    verbose_name="groups",
                )),
                ("user_permissions", models.ManyToManyField(
                    blank=True,
                    help_text="Specific permissions for this user.",
                    related_name="user_set",
                    related_query_name="user",
                    to="auth.permission",
                    verbose_name="user permissions",
                )),
            ],
            options={
                "verbose_name": "Пользователь",
                "verbose_name_plural": "Пользователи",
            },
            managers=[
                ("objects", accounts.models.AccountManager()),
            ],
        ),
        migrations.CreateModel(
            name="UserConfirm",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(max_length=8, unique=True, verbose_name="Ключ")),
                ("created", models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name="Создан")),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="confirms",
                    to=settings.AUTH_USER_MODEL,
                    verbose_name="Пользователь",
                )),
            ],
            options={
                "verbose_name": "Ключ подтверждения",
                "verbose_name_plural": "Ключи подтверждения",
                "ordering": ["-created"],
            },
        ),
    ]
