from typing import NamedTuple, Tuple


class SecurityHeader(NamedTuple):
    name: str
    value: str

    @property
    def display_name(self) -> str:
        # strict-transport-security -> Strict-Transport-Security
        return "-".join(part.capitalize() for part in self.name.split("-"))


SECURITY_HEADERS: Tuple[SecurityHeader, ...] = (
    SecurityHeader("strict-transport-security", "max-age=63072000; includeSubdomains; preload"),
    SecurityHeader(
        "content-security-policy",
        "default-src 'self'; script-src 'self' 'unsafe-inline'; style-src 'self' 'unsafe-inline'; "
        "img-src 'self' data: https:; font-src 'self'; connect-src 'self'",
    ),
    SecurityHeader("x-content-type-options", "nosniff"),
    SecurityHeader("x-frame-options", "DENY"),
    SecurityHeader("x-xss-protection", "1; mode=block"),
    SecurityHeader("referrer-policy", "strict-origin-when-cross-origin"),
    SecurityHeader("permissions-policy", "geolocation=(), microphone=(), camera=()"),
)

MANAGED_NAMES = frozenset(h.name for h in SECURITY_HEADERS)
