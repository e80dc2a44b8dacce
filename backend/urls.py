# Путь: backend/urls.py
# Назначение: Корневой роутинг Django-проекта фотоархива (админка, API аутентификации, API фотографий).

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path("admin/", admin.site.urls),

    # ===== API =====
    path("api/auth/", include("accounts.urls")),
    path("api/photo/", include("photos.urls")),
]
