"""
Builders for structured header values.

Field order is fixed: some clients parse these headers positionally.
"""

from __future__ import annotations

from datetime import datetime, timedelta
from urllib.parse import quote

from httpresp.core.common.utils import format_http_date
from httpresp.core.domain.directives import LinkDirective, WarningDirective

# RFC 5987 attr-char minus ALPHA / DIGIT, which ``quote`` never escapes.
_ATTR_CHAR_SAFE = "!#$&+-.^_`|~"


def warning_value(warning: WarningDirective) -> str:
    """Format ``code [agent] ["text"] ["date"]``."""
    value = str(warning.code)
    if warning.agent:
        value += " " + warning.agent
    if warning.text:
        value += f' "{warning.text}"'
    if warning.date is not None:
        value += f' "{format_http_date(warning.date)}"'
    return value


def link_value(link: LinkDirective) -> str:
    """Format ``<uri>; rel="..."[; type="..."][; title="..."]``."""
    value = f'<{link.uri}>; rel="{link.rel}"'
    if link.type:
        value += f'; type="{link.type}"'
    if link.title:
        value += f'; title="{link.title}"'
    return value


def content_disposition_value(
    disposition_type: str, filename: str, use_utf8_encoding: bool = False
) -> str:
    """Format a Content-Disposition value.

    Args:
        disposition_type: ``attachment`` or ``inline``
        filename: Name offered to the client
        use_utf8_encoding: Emit the RFC 5987 ``filename*=UTF-8''...`` form.
            Names that are not ASCII always use it.

    Returns:
        The header value
    """
    if use_utf8_encoding or not filename.isascii():
        encoded = quote(filename, safe=_ATTR_CHAR_SAFE, encoding="utf-8")
        return f"{disposition_type}; filename*=UTF-8''{encoded}"
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    return f'{disposition_type}; filename="{escaped}"'


def strict_transport_security_value(
    max_age_seconds: int, include_subdomains: bool = False, preload: bool = False
) -> str:
    value = f"max-age={max_age_seconds}"
    if include_subdomains:
        value += "; includeSubDomains"
    if preload:
        value += "; preload"
    return value


def retry_after_value(value: int | datetime | timedelta) -> str:
    """Normalise a delay to integer seconds or a moment to an HTTP-date.

    Durations are truncated to whole seconds.

    Raises:
        TypeError: For any other type, including ``bool``
    """
    if isinstance(value, bool):
        raise TypeError("Retry-After does not accept bool values")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, datetime):
        return format_http_date(value)
    if isinstance(value, timedelta):
        return str(int(value.total_seconds()))
    raise TypeError(
        f"Retry-After expects int, datetime or timedelta, got {type(value).__name__}"
    )


def content_range_value(start: int, end: int, total: int) -> str:
    return f"bytes {start}-{end}/{total}"


def upgrade_insecure_requests_value(enable: bool | int | str) -> str:
    if isinstance(enable, bool):
        return "1" if enable else "0"
    if isinstance(enable, int):
        return "1" if enable > 0 else "0"
    return enable
