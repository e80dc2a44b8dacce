# Путь: backend/photos/urls.py
# Назначение: Роутинг API фотографий.

from django.urls import path

from .views import PhotoFieldsView

app_name = "photos"

urlpatterns = [
    path("fields/", PhotoFieldsView.as_view(), name="fields"),
]
