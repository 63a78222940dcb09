"""Session cookie issuing, clearing and verification."""

import pytest

from valencio.config import settings
from valencio.utils import session_cookie


@pytest.mark.parametrize(
    "role,expected",
    [("admin", "admin_active"), ("staff", "role_staff"), ("viewer", "role_viewer")],
)
def test_role_mapping(role, expected):
    assert session_cookie.role_value_for(role) == expected


def test_issue_sets_session_only_cookie():
    header = session_cookie.issue("admin_active")
    name, _, rest = header.partition("=")
    assert name == "valencio_admin"
    attrs = [part.strip() for part in rest.split(";")[1:]]
    assert attrs == ["Path=/", "HttpOnly", "Secure", "SameSite=Lax"]
    assert "Max-Age" not in header
    assert "Expires" not in header


def test_clear_expires_immediately_with_strict_samesite():
    header = session_cookie.clear()
    assert header.startswith("valencio_admin=;")
    assert "Max-Age=0" in header
    assert "SameSite=Strict" in header
    assert "HttpOnly" in header and "Secure" in header


def test_signed_value_reads_back():
    value = session_cookie.sign("admin_active")
    assert session_cookie.read(value) == "admin_active"


def test_value_is_not_the_plain_role():
    assert "admin_active" not in session_cookie.sign("admin_active")


def test_tampered_value_is_rejected():
    value = session_cookie.sign("role_viewer")
    header, payload, signature = value.split(".")
    forged_payload = session_cookie.sign("admin_active").split(".")[1]
    assert session_cookie.read(f"{header}.{forged_payload}.{signature}") is None


def test_other_secret_is_rejected(monkeypatch):
    value = session_cookie.sign("admin_active")
    monkeypatch.setattr(settings, "COOKIE_SECRET", "rotated")
    assert session_cookie.read(value) is None


@pytest.mark.parametrize("value", [None, "", "garbage", "YWRtaW5fYWN0aXZlOnZhbGVuY2lv"])
def test_unsigned_values_are_rejected(value):
    assert session_cookie.read(value) is None
