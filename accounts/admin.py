# Путь: backend/accounts/admin.py
# Назначение: Админка пользователей фотоархива и ключей подтверждения.

from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DJUserAdmin

from .models import Counter, User, UserConfirm


@admin.register(User)
class UserAdmin(DJUserAdmin):
    fieldsets = DJUserAdmin.fieldsets + (
        ("Фотоархив", {"fields": ("cid", "disp", "role", "avatar", "activatedate", "settings")}),
        ("Защита входа", {"fields": ("login_attempts", "lock_until")}),
    )
    add_fieldsets = DJUserAdmin.add_fieldsets + (
        ("Фотоархив", {"fields": ("email", "disp", "role")}),
    )

    list_display = ("username", "cid", "email", "role", "is_active", "activatedate")
    list_filter = ("role", "is_active", "is_staff", "is_superuser")
    search_fields = ("username", "email", "disp")
    ordering = ("username",)


@admin.register(UserConfirm)
class UserConfirmAdmin(admin.ModelAdmin):
    list_display = ("key", "user", "purpose_display", "created", "expired")
    search_fields = ("key", "user__username", "user__email")
    raw_id_fields = ("user",)

    @admin.display(description="Назначение")
    def purpose_display(self, obj):
        return obj.purpose.label if obj.purpose else "—"

    @admin.display(description="Истёк", boolean=True)
    def expired(self, obj):
        return obj.is_expired


@admin.register(Counter)
class CounterAdmin(admin.ModelAdmin):
    list_display = ("name", "next")
