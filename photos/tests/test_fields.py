import pytest
from rest_framework.test import APIClient

from photos.fields import (
    DIR_VALS_ARR,
    WATERSIGN_LENGTH,
    clean_watersign,
    client_from_user_agent,
    dir_icons_for,
    get_dir_icon,
)

FIREFOX_WIN = "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:130.0) Gecko/20100101 Firefox/130.0"
SAFARI_MAC = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 "
    "(KHTML, like Gecko) Version/17.5 Safari/605.1.15"
)
CHROME_LINUX = "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/128.0 Safari/537.36"


@pytest.mark.parametrize(
    "direction,platform,browser,expected",
    [
        ("n", "", "", "&#xf1e0;"),
        ("aero", "Win32", "CHROME", "&#xe3f7;"),
        ("sw", "Linux x86_64", "FIREFOX", "🡧"),
        ("n", "MacIntel", "", "↑&nbsp;"),
        ("ne", "MACINTEL", "FIREFOX", "↗&nbsp;"),
        ("e", "MacIntel", "", "→"),
        ("w", "MacIntel", "", "←"),
        ("aero", "MacIntel", "", "◎"),
    ],
)
def test_get_dir_icon(direction, platform, browser, expected):
    assert get_dir_icon(direction, platform, browser) == expected


def test_get_dir_icon_unknown_direction():
    with pytest.raises(KeyError):
        get_dir_icon("up")


def test_client_from_user_agent():
    assert client_from_user_agent(FIREFOX_WIN) == ("", "FIREFOX")
    assert client_from_user_agent(SAFARI_MAC) == ("MAC", "")
    assert client_from_user_agent(CHROME_LINUX) == ("", "")
    assert client_from_user_agent("") == ("", "")


def test_dir_icons_cover_all_directions():
    icons = dir_icons_for()
    assert list(icons) == DIR_VALS_ARR


def test_clean_watersign_drops_disallowed_characters():
    assert clean_watersign("Фото © John Doe, 1950!") == "© John Doe, 1950!"
    assert clean_watersign("") == ""


def test_clean_watersign_trims_to_max_length():
    assert len(clean_watersign("a" * 100)) == WATERSIGN_LENGTH


@pytest.mark.django_db
def test_photo_fields_api_uses_user_agent():
    client = APIClient()
    response = client.get("/api/photo/fields/", HTTP_USER_AGENT=FIREFOX_WIN)

    assert response.status_code == 200
    data = response.json()
    assert data["dir"] == "Направление съемки"
    assert data["typeVals"] == {"1": "Фотография", "2": "Картина/рисунок"}
    assert data["types"] == ["1", "2"]
    assert data["dirVals"]["aero"] == "Аэро/Спутник"
    assert data["watersignLength"] == 65
    assert data["dirIcons"]["n"] == "🡡"


@pytest.mark.django_db
def test_photo_fields_api_mac_icons():
    response = APIClient().get("/api/photo/fields/", HTTP_USER_AGENT=SAFARI_MAC)
    icons = response.json()["dirIcons"]
    assert icons["n"] == "↑&nbsp;"
    assert icons["e"] == "→"
