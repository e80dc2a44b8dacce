from datetime import timedelta

import pytest
from django.utils import timezone

from accounts.models import Counter, UserConfirm, UserLookupError
from backend.errors import constants

from .conftest import PASSWORD, User, create_user


@pytest.mark.django_db
def test_counter_increment_is_sequential():
    assert Counter.increment("user") == 1
    assert Counter.increment("user") == 2
    assert Counter.increment("photo") == 1


@pytest.mark.django_db
def test_get_authenticated_by_login_ignores_case(user):
    assert User.objects.get_authenticated("BOB", PASSWORD) == user


@pytest.mark.django_db
def test_get_authenticated_by_email(user):
    assert User.objects.get_authenticated("Bob@Example.com", PASSWORD) == user


@pytest.mark.django_db
def test_get_authenticated_unknown_user():
    with pytest.raises(UserLookupError) as exc:
        User.objects.get_authenticated("ghost", PASSWORD)
    assert exc.value.code == constants.NOT_FOUND_USER


@pytest.mark.django_db
def test_get_authenticated_inactive_user_is_not_allowed():
    create_user("carol", is_active=False)
    with pytest.raises(UserLookupError) as exc:
        User.objects.get_authenticated("carol", PASSWORD)
    assert exc.value.code == constants.AUTHENTICATION_NOT_ALLOWED


@pytest.mark.django_db
def test_wrong_password_locks_account_after_max_attempts(user, settings):
    settings.AUTH_MAX_LOGIN_ATTEMPTS = 3
    settings.AUTH_LOCK_TIME = timedelta(minutes=5)

    for _ in range(3):
        with pytest.raises(UserLookupError) as exc:
            User.objects.get_authenticated("bob", "wrong")
        assert exc.value.code == constants.AUTHENTICATION_PASS_WRONG

    user.refresh_from_db()
    assert user.is_locked
    assert user.login_attempts == 0

    with pytest.raises(UserLookupError) as exc:
        User.objects.get_authenticated("bob", PASSWORD)
    assert exc.value.code == constants.AUTHENTICATION_MAX_ATTEMPTS


@pytest.mark.django_db
def test_successful_login_resets_failed_attempts(user):
    with pytest.raises(UserLookupError):
        User.objects.get_authenticated("bob", "wrong")
    user.refresh_from_db()
    assert user.login_attempts == 1

    User.objects.get_authenticated("bob", PASSWORD)
    user.refresh_from_db()
    assert user.login_attempts == 0
    assert user.lock_until is None


@pytest.mark.django_db
def test_is_admin_by_role_or_superuser():
    assert not create_user("plain").is_admin
    assert create_user("moder", role=User.Roles.MODERATOR).is_admin is False
    assert create_user("admin", role=User.Roles.ADMIN).is_admin
    assert User.objects.create_superuser("root", "root@example.com", PASSWORD).is_admin


@pytest.mark.django_db
def test_plain_user(user):
    user.cid = 42
    data = user.plain()
    assert data["login"] == "bob"
    assert data["cid"] == 42
    assert data["disp"] == "bob"
    assert data["settings"] == {"subscr_auto_reply": True}
    assert "password" not in data


@pytest.mark.django_db
def test_issue_keys_by_purpose(user):
    registration = UserConfirm.objects.issue(user, 7)
    recall = UserConfirm.objects.issue(user, 8)

    assert len(registration.key) == 7
    assert registration.purpose == UserConfirm.Purpose.REGISTRATION
    assert len(recall.key) == 8
    assert recall.purpose == UserConfirm.Purpose.RECALL


@pytest.mark.django_db
def test_find_skips_expired_keys(user, settings):
    settings.CONFIRM_KEY_TTL = timedelta(days=2)
    fresh = UserConfirm.objects.issue(user, 7)
    stale = UserConfirm.objects.issue(user, 8)
    UserConfirm.objects.filter(pk=stale.pk).update(created=timezone.now() - timedelta(days=3))

    assert UserConfirm.objects.find(fresh.key) == fresh
    assert UserConfirm.objects.find(stale.key) is None
    assert list(UserConfirm.objects.expired()) == [stale]
