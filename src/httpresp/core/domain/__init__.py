from .cookies import Cookie, CookieStore, SameSite, cookie_name_of
from .directives import LinkDirective, WarningDirective
from .error_envelope import ErrorEnvelope
from .headers import HeaderMap, canonical_header_key

__all__ = [
    "Cookie",
    "CookieStore",
    "ErrorEnvelope",
    "HeaderMap",
    "LinkDirective",
    "SameSite",
    "WarningDirective",
    "canonical_header_key",
    "cookie_name_of",
]
