# Путь: backend/photos/fields.py
# Назначение: Словарь подписей полей фотографии (статус, год, координаты, направление съёмки и т.д.)
#             и иконки направлений съёмки с учётом платформы/браузера клиента.
# Иконки направлений: [по умолчанию (иконочный шрифт), Firefox, Mac].
# Стрелки в разных браузерах и платформах отображаются по-разному, поэтому вариантов три.

import re

DIR_ICONS = {
    "n": ["&#xf1e0;", "🡡", "↑"],
    "ne": ["&#xf1e1;", "🡥", "↗"],
    "e": ["&#xf1df;", "🡢", "→"],
    "se": ["&#xf1e4;", "🡦", "↘"],
    "s": ["&#xf1e3;", "🡣", "↓"],
    "sw": ["&#xf1e5;", "🡧", "↙"],
    "w": ["&#xf1e6;", "🡠", "←"],
    "nw": ["&#xf1e2;", "🡤", "↖"],
    "aero": ["&#xe3f7;", "◎", "◎"],
}

ICON_DEFAULT, ICON_FIREFOX, ICON_MAC = 0, 1, 2

# На Mac эти глифы уже выровнены, остальным нужен пробел после стрелки
MAC_ALIGNED_DIRS = {"e", "w", "aero"}

TYPE_VALS = {
    "1": "Фотография",
    "2": "Картина/рисунок",
}

DIR_VALS = {
    "n": "Север",
    "ne": "Северо-Восток",
    "e": "Восток",
    "se": "Юго-Восток",
    "s": "Юг",
    "sw": "Юго-Запад",
    "w": "Запад",
    "nw": "Северо-Запад",
    "aero": "Аэро/Спутник",
}

# Порядок направлений в выпадающем списке
DIR_VALS_ARR = ["w", "nw", "n", "ne", "e", "se", "s", "sw", "aero"]

WATERSIGN_LENGTH = 65
WATERSIGN_PATTERN = r"""[\w\.,:;\(\)\[\]\\\|/№§©®℗℠™•\?!@#\$%\^&\*\+\-={}"'<>~` ]"""
WATERSIGN_RE = re.compile(WATERSIGN_PATTERN, re.ASCII)

FIELDS = {
    "s": "Статус",
    "y": "Год",
    "geo": "Координаты",
    "type": "Тип",
    "regions": "Регион",
    "title": "Название фотографии",
    "desc": "Описание",
    "source": "Источник",
    "author": "Автор",
    "address": "Адрес точки съемки",
    "dir": "Направление съемки",
    "typeVals": TYPE_VALS,
    "types": list(TYPE_VALS),
    "dirVals": DIR_VALS,
    "dirValsArr": DIR_VALS_ARR,
    "watersign": {
        "title": "Подпись на вотермарке",
        "profile": "Как указано в профиле",
        "individual": "Индивидуально",
        "option": "Добавлять подпись на вотермарк",
        "default": "Настройки системы",
        "text": "Текст",
    },
    "watersignText": "Подпись на вотермарке",
    "watersignLength": WATERSIGN_LENGTH,
    "watersignPattern": WATERSIGN_PATTERN,
    "downloadOrigin": {
        "title": "Скачивание оригинала",
        "profile": "Как указано в профиле",
        "individual": "Индивидуально",
        "option": "Разрешать другим пользователям скачивать оригинал",
    },
    "painting": {
        "title": "Название",
    },
}


def client_from_user_agent(user_agent: str) -> tuple[str, str]:
    """
    Грубое определение (platform, browser) по User-Agent в верхнем регистре:
    platform = "MAC" для macOS/iOS, browser = "FIREFOX" для Firefox.
    """
    ua = (user_agent or "").upper()
    platform = "MAC" if ("MACINTOSH" in ua or "MAC OS" in ua) else ""
    browser = "FIREFOX" if "FIREFOX" in ua else ""
    return platform, browser


def get_dir_icon(direction: str, platform: str = "", browser: str = "") -> str:
    """Иконка направления съёмки для конкретного клиента. KeyError для неизвестного направления."""
    if "MAC" in (platform or "").upper():
        index = ICON_MAC
    elif (browser or "").upper() == "FIREFOX":
        index = ICON_FIREFOX
    else:
        index = ICON_DEFAULT

    icon = DIR_ICONS[direction][index]
    if index == ICON_MAC and direction not in MAC_ALIGNED_DIRS:
        # выравнивание текста в пунктах списка на Mac
        return icon + "&nbsp;"
    return icon


def dir_icons_for(platform: str = "", browser: str = "") -> dict:
    return {direction: get_dir_icon(direction, platform, browser) for direction in DIR_VALS_ARR}


def clean_watersign(text: str) -> str:
    """Оставляет в подписи вотермарка только допустимые символы и обрезает до WATERSIGN_LENGTH."""
    if not text:
        return ""
    return "".join(WATERSIGN_RE.findall(text)).strip()[:WATERSIGN_LENGTH]
