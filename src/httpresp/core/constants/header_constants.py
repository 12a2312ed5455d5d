"""Constants for HTTP header names and the header value policy table.

Headers listed in ``SINGLE_VALUE_HEADERS`` carry exactly one meaningful value:
setting or adding them keeps only the first supplied value. Every other
header is treated as a list-valued header.
"""

HEADER_ACCEPT = "Accept"
HEADER_ACCEPT_CHARSET = "Accept-Charset"
HEADER_ACCEPT_ENCODING = "Accept-Encoding"
HEADER_ACCEPT_LANGUAGE = "Accept-Language"
HEADER_ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
HEADER_ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"
HEADER_ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"
HEADER_ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"
HEADER_ACCESS_CONTROL_EXPOSE_HEADERS = "Access-Control-Expose-Headers"
HEADER_ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"
HEADER_AUTHORIZATION = "Authorization"
HEADER_CACHE_CONTROL = "Cache-Control"
HEADER_CONNECTION = "Connection"
HEADER_CONTENT_DISPOSITION = "Content-Disposition"
HEADER_CONTENT_DPR = "Content-DPR"
HEADER_CONTENT_ENCODING = "Content-Encoding"
HEADER_CONTENT_LANGUAGE = "Content-Language"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_CONTENT_LOCATION = "Content-Location"
HEADER_CONTENT_RANGE = "Content-Range"
HEADER_CONTENT_SECURITY_POLICY = "Content-Security-Policy"
HEADER_CONTENT_SECURITY_POLICY_REPORT_ONLY = "Content-Security-Policy-Report-Only"
HEADER_CONTENT_TYPE = "Content-Type"
HEADER_DATE = "Date"
HEADER_DPR = "DPR"
HEADER_ETAG = "ETag"
HEADER_EXPIRES = "Expires"
HEADER_HOST = "Host"
HEADER_IF_MATCH = "If-Match"
HEADER_IF_MODIFIED_SINCE = "If-Modified-Since"
HEADER_IF_NONE_MATCH = "If-None-Match"
HEADER_IF_RANGE = "If-Range"
HEADER_IF_UNMODIFIED_SINCE = "If-Unmodified-Since"
HEADER_LAST_MODIFIED = "Last-Modified"
HEADER_LINK = "Link"
HEADER_LOCATION = "Location"
HEADER_ORIGIN = "Origin"
HEADER_PRAGMA = "Pragma"
HEADER_PROXY_AUTHENTICATE = "Proxy-Authenticate"
HEADER_PROXY_AUTHORIZATION = "Proxy-Authorization"
HEADER_REFERER = "Referer"
HEADER_REFERRER_POLICY = "Referrer-Policy"
HEADER_RETRY_AFTER = "Retry-After"
HEADER_SERVER = "Server"
HEADER_SET_COOKIE = "Set-Cookie"
HEADER_STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"
HEADER_TRANSFER_ENCODING = "Transfer-Encoding"
HEADER_UPGRADE_INSECURE_REQUESTS = "Upgrade-Insecure-Requests"
HEADER_USER_AGENT = "User-Agent"
HEADER_VARY = "Vary"
HEADER_VIEWPORT_WIDTH = "Viewport-Width"
HEADER_WARNING = "Warning"
HEADER_WIDTH = "Width"
HEADER_WWW_AUTHENTICATE = "WWW-Authenticate"
HEADER_X_CONTENT_TYPE_OPTIONS = "X-Content-Type-Options"
HEADER_X_FRAME_OPTIONS = "X-Frame-Options"
HEADER_X_XSS_PROTECTION = "X-XSS-Protection"

SINGLE_VALUE_HEADERS: frozenset[str] = frozenset(
    {
        HEADER_CONTENT_TYPE,
        HEADER_ETAG,
        HEADER_LAST_MODIFIED,
        HEADER_CONTENT_LENGTH,
        HEADER_USER_AGENT,
        HEADER_HOST,
        HEADER_REFERER,
        HEADER_SERVER,
        HEADER_DATE,
        HEADER_LOCATION,
        HEADER_RETRY_AFTER,
        HEADER_CONTENT_DISPOSITION,
        HEADER_CONTENT_ENCODING,
        HEADER_CONTENT_LANGUAGE,
        HEADER_CONTENT_LOCATION,
        HEADER_IF_MODIFIED_SINCE,
        HEADER_IF_UNMODIFIED_SINCE,
        HEADER_IF_RANGE,
        HEADER_STRICT_TRANSPORT_SECURITY,
        HEADER_UPGRADE_INSECURE_REQUESTS,
        HEADER_X_CONTENT_TYPE_OPTIONS,
        HEADER_X_FRAME_OPTIONS,
        HEADER_X_XSS_PROTECTION,
        HEADER_CONTENT_DPR,
        HEADER_DPR,
        HEADER_VIEWPORT_WIDTH,
        HEADER_WIDTH,
        HEADER_CONTENT_RANGE,
    }
)

# Lower-cased lookup for the policy table and the spelling of known names.
_SINGLE_VALUE_KEYS: frozenset[str] = frozenset(
    name.lower() for name in SINGLE_VALUE_HEADERS
)
KNOWN_HEADER_SPELLINGS: dict[str, str] = {
    value.lower(): value
    for key, value in dict(globals()).items()
    if key.startswith("HEADER_") and isinstance(value, str)
}


def is_single_value_header(name: str) -> bool:
    """Return True when ``name`` (any case) carries a single value."""
    return name.strip().lower() in _SINGLE_VALUE_KEYS
