from datetime import datetime, timedelta, timezone as dt_timezone

from accounts import mail


def test_confirm_link_strips_trailing_slash(settings):
    settings.FRONTEND_BASE_URL = "https://photos.example.com/"
    assert mail.confirm_link("abcdefg") == "https://photos.example.com/confirm/abcdefg"


def test_link_valid_text_mentions_ttl_and_deadline(settings):
    settings.CONFIRM_KEY_TTL = timedelta(days=2)
    now = datetime(2026, 10, 19, 12, 0, tzinfo=dt_timezone.utc)

    text = mail.link_valid_text(now)

    assert text.startswith("2")
    assert "(до " in text
    assert "2026" in text
