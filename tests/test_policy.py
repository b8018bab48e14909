import pytest

from edge_headers.policy import MANAGED_NAMES, SECURITY_HEADERS, SecurityHeader


EXPECTED = {
    "strict-transport-security": "max-age=63072000; includeSubdomains; preload",
    "content-security-policy": (
        "default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; font-src 'self'; connect-src 'self'"
    ),
    "x-content-type-options": "nosniff",
    "x-frame-options": "DENY",
    "x-xss-protection": "1; mode=block",
    "referrer-policy": "strict-origin-when-cross-origin",
    "permissions-policy": "geolocation=(), microphone=(), camera=()",
}


def test_policy_values_are_verbatim():
    assert dict(SECURITY_HEADERS) == EXPECTED


def test_policy_has_seven_lowercase_names():
    assert len(SECURITY_HEADERS) == 7
    assert len(MANAGED_NAMES) == 7
    assert all(h.name == h.name.lower() for h in SECURITY_HEADERS)


def test_policy_is_immutable():
    assert isinstance(SECURITY_HEADERS, tuple)
    with pytest.raises(AttributeError):
        SECURITY_HEADERS[0].value = "max-age=0"


def test_display_name():
    assert SecurityHeader("strict-transport-security", "x").display_name == "Strict-Transport-Security"
    assert SecurityHeader("x-frame-options", "x").display_name == "X-Frame-Options"
