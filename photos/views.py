# Путь: backend/photos/views.py
# Назначение: API словаря полей фотографии. Иконки направлений подбираются под User-Agent клиента.

from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .fields import FIELDS, client_from_user_agent, dir_icons_for


class PhotoFieldsView(APIView):
    """
    GET /api/photo/fields/
    Подписи полей фотографии + dirIcons под текущий браузер/платформу.
    """
    permission_classes = [permissions.AllowAny]

    def get(self, request):
        platform, browser = client_from_user_agent(request.META.get("HTTP_USER_AGENT", ""))
        return Response({**FIELDS, "dirIcons": dir_icons_for(platform, browser)})
