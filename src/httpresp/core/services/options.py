"""
Response options.

An option is a callable that mutates a ``Response`` and returns it. Options
are applied in order when the builder is created (or via
``Response.apply``), so a later option for the same header or status wins.

Header options go through ``Response.add_header``: list-valued headers gain
one line per value, single-valued headers keep only their first value.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from httpresp.core.common.utils import format_http_date
from httpresp.core.constants import header_constants as h
from httpresp.core.constants import mime_constants as mime
from httpresp.core.domain.cookies import Cookie
from httpresp.core.domain.directives import LinkDirective, WarningDirective
from httpresp.core.services import header_assemblers
from httpresp.core.services.json_codec import JSONEncodeFunc
from httpresp.core.services.response import Option, Response


def with_header(key: str, *values: str) -> Option:
    """Add ``values`` to header ``key``."""

    def option(response: Response) -> Response:
        return response.add_header(key, *values)

    return option


def with_status(code: int) -> Option:
    def option(response: Response) -> Response:
        return response.set_status(code)

    return option


def with_cookie(cookie: Cookie) -> Option:
    def option(response: Response) -> Response:
        return response.set_cookie(cookie)

    return option


def with_json_encoder(encoder: JSONEncodeFunc) -> Option:
    """Replace the default JSON encoder for JSON, JSONP and error bodies."""

    def option(response: Response) -> Response:
        return response.set_json_encoder(encoder)

    return option


# ----------------------------------------------------------------------
# Representation and validators
# ----------------------------------------------------------------------


def add_content_type(value: str) -> Option:
    return with_header(h.HEADER_CONTENT_TYPE, value)


def add_etag(value: str) -> Option:
    return with_header(h.HEADER_ETAG, value)


def add_last_modified(moment: datetime) -> Option:
    return with_header(h.HEADER_LAST_MODIFIED, format_http_date(moment))


def add_content_length(length: int) -> Option:
    return with_header(h.HEADER_CONTENT_LENGTH, str(length))


def add_content_encoding(value: str) -> Option:
    return with_header(h.HEADER_CONTENT_ENCODING, value)


def add_content_language(value: str) -> Option:
    return with_header(h.HEADER_CONTENT_LANGUAGE, value)


def add_content_location(value: str) -> Option:
    return with_header(h.HEADER_CONTENT_LOCATION, value)


def add_content_disposition(
    disposition_type: str, filename: str, use_utf8_encoding: bool = False
) -> Option:
    """Add ``Content-Disposition`` for ``filename``.

    With ``use_utf8_encoding`` the RFC 5987 ``filename*=UTF-8''...`` form is
    used instead of a quoted ``filename``.
    """
    return with_header(
        h.HEADER_CONTENT_DISPOSITION,
        header_assemblers.content_disposition_value(
            disposition_type, filename, use_utf8_encoding
        ),
    )


def add_content_range(start: int, end: int, total: int) -> Option:
    """Set ``Content-Range: bytes <start>-<end>/<total>``."""

    def option(response: Response) -> Response:
        return response.set_header(
            h.HEADER_CONTENT_RANGE,
            header_assemblers.content_range_value(start, end, total),
        )

    return option


def add_content_dpr(value: float) -> Option:
    return with_header(h.HEADER_CONTENT_DPR, _format_float(value))


# ----------------------------------------------------------------------
# Routing, dates and caching
# ----------------------------------------------------------------------


def add_location(value: str) -> Option:
    return with_header(h.HEADER_LOCATION, value)


def add_server(value: str) -> Option:
    return with_header(h.HEADER_SERVER, value)


def add_date(moment: datetime) -> Option:
    return with_header(h.HEADER_DATE, format_http_date(moment))


def add_if_modified_since(moment: datetime) -> Option:
    return with_header(h.HEADER_IF_MODIFIED_SINCE, format_http_date(moment))


def add_if_unmodified_since(moment: datetime) -> Option:
    return with_header(h.HEADER_IF_UNMODIFIED_SINCE, format_http_date(moment))


def add_retry_after(value: int | datetime | timedelta) -> Option:
    """Add ``Retry-After`` from seconds, a moment, or a duration.

    Raises:
        TypeError: If ``value`` is of any other type
    """
    return with_header(h.HEADER_RETRY_AFTER, header_assemblers.retry_after_value(value))


def add_cache_control(*values: str) -> Option:
    return with_header(h.HEADER_CACHE_CONTROL, *values)


def add_pragma(*values: str) -> Option:
    return with_header(h.HEADER_PRAGMA, *values)


def add_expires(moment: datetime) -> Option:
    return with_header(h.HEADER_EXPIRES, format_http_date(moment))


def add_vary(*values: str) -> Option:
    return with_header(h.HEADER_VARY, *values)


def add_warning(*warnings: WarningDirective) -> Option:
    """Add one ``Warning`` line per directive."""

    def option(response: Response) -> Response:
        for warning in warnings:
            response.headers.add(h.HEADER_WARNING, header_assemblers.warning_value(warning))
        return response

    return option


def add_link(*links: LinkDirective) -> Option:
    """Add one ``Link`` line per directive."""

    def option(response: Response) -> Response:
        for link in links:
            response.headers.add(h.HEADER_LINK, header_assemblers.link_value(link))
        return response

    return option


def add_connection(*values: str) -> Option:
    return with_header(h.HEADER_CONNECTION, *values)


def add_transfer_encoding(*values: str) -> Option:
    return with_header(h.HEADER_TRANSFER_ENCODING, *values)


# ----------------------------------------------------------------------
# Authentication
# ----------------------------------------------------------------------


def add_www_authenticate(*values: str) -> Option:
    return with_header(h.HEADER_WWW_AUTHENTICATE, *values)


def add_proxy_authenticate(*values: str) -> Option:
    return with_header(h.HEADER_PROXY_AUTHENTICATE, *values)


# ----------------------------------------------------------------------
# Security
# ----------------------------------------------------------------------


def add_strict_transport_security(
    max_age_seconds: int, include_subdomains: bool = False, preload: bool = False
) -> Option:
    return with_header(
        h.HEADER_STRICT_TRANSPORT_SECURITY,
        header_assemblers.strict_transport_security_value(
            max_age_seconds, include_subdomains, preload
        ),
    )


def add_content_security_policy(*values: str) -> Option:
    return with_header(h.HEADER_CONTENT_SECURITY_POLICY, *values)


def add_content_security_policy_report_only(*values: str) -> Option:
    return with_header(h.HEADER_CONTENT_SECURITY_POLICY_REPORT_ONLY, *values)


def add_referrer_policy(value: str) -> Option:
    return with_header(h.HEADER_REFERRER_POLICY, value)


def add_upgrade_insecure_requests(enable: bool | int | str) -> Option:
    return with_header(
        h.HEADER_UPGRADE_INSECURE_REQUESTS,
        header_assemblers.upgrade_insecure_requests_value(enable),
    )


def add_x_content_type_options(value: str = "nosniff") -> Option:
    return with_header(h.HEADER_X_CONTENT_TYPE_OPTIONS, value)


def add_x_frame_options(value: str) -> Option:
    return with_header(h.HEADER_X_FRAME_OPTIONS, value)


def add_x_xss_protection(value: str) -> Option:
    return with_header(h.HEADER_X_XSS_PROTECTION, value)


# ----------------------------------------------------------------------
# CORS
# ----------------------------------------------------------------------


def add_access_control_allow_origin(*values: str) -> Option:
    return with_header(h.HEADER_ACCESS_CONTROL_ALLOW_ORIGIN, *values)


def add_access_control_allow_credentials(enable: bool) -> Option:
    return with_header(
        h.HEADER_ACCESS_CONTROL_ALLOW_CREDENTIALS, "true" if enable else "false"
    )


def add_access_control_allow_headers(*values: str) -> Option:
    return with_header(h.HEADER_ACCESS_CONTROL_ALLOW_HEADERS, *values)


def add_access_control_allow_methods(*values: str) -> Option:
    return with_header(h.HEADER_ACCESS_CONTROL_ALLOW_METHODS, *values)


def add_access_control_expose_headers(*values: str) -> Option:
    return with_header(h.HEADER_ACCESS_CONTROL_EXPOSE_HEADERS, *values)


def add_access_control_max_age(seconds: int) -> Option:
    return with_header(h.HEADER_ACCESS_CONTROL_MAX_AGE, str(seconds))


# ----------------------------------------------------------------------
# Content negotiation and client hints
# ----------------------------------------------------------------------


def add_accept(*values: str) -> Option:
    return with_header(h.HEADER_ACCEPT, *values)


def add_accept_charset(*values: str) -> Option:
    return with_header(h.HEADER_ACCEPT_CHARSET, *values)


def add_accept_encoding(*values: str) -> Option:
    return with_header(h.HEADER_ACCEPT_ENCODING, *values)


def add_accept_language(*values: str) -> Option:
    return with_header(h.HEADER_ACCEPT_LANGUAGE, *values)


def add_dpr(value: float) -> Option:
    return with_header(h.HEADER_DPR, _format_float(value))


def add_viewport_width(value: int) -> Option:
    return with_header(h.HEADER_VIEWPORT_WIDTH, str(value))


def add_width(value: int) -> Option:
    return with_header(h.HEADER_WIDTH, str(value))


def _format_float(value: float) -> str:
    # Shortest round-trip form without a trailing ".0" (2.0 -> "2").
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


# ----------------------------------------------------------------------
# Content type shortcuts
# ----------------------------------------------------------------------


def as_text_plain() -> Option:
    return add_content_type(mime.MIME_TEXT_PLAIN)


def as_text_html() -> Option:
    return add_content_type(mime.MIME_TEXT_HTML)


def as_text_xml() -> Option:
    return add_content_type(mime.MIME_TEXT_XML)


def as_text_javascript() -> Option:
    return add_content_type(mime.MIME_TEXT_JAVASCRIPT)


def as_application_json() -> Option:
    return add_content_type(mime.MIME_APPLICATION_JSON)


def as_application_javascript() -> Option:
    return add_content_type(mime.MIME_APPLICATION_JAVASCRIPT)


def as_application_xml() -> Option:
    return add_content_type(mime.MIME_APPLICATION_XML)


def as_application_form() -> Option:
    return add_content_type(mime.MIME_APPLICATION_FORM)


def as_octet_stream() -> Option:
    return add_content_type(mime.MIME_OCTET_STREAM)


def as_multipart_form() -> Option:
    return add_content_type(mime.MIME_MULTIPART_FORM)


def as_text_plain_charset_utf8() -> Option:
    return add_content_type(mime.MIME_TEXT_PLAIN_CHARSET_UTF8)


def as_text_html_charset_utf8() -> Option:
    return add_content_type(mime.MIME_TEXT_HTML_CHARSET_UTF8)


def as_text_xml_charset_utf8() -> Option:
    return add_content_type(mime.MIME_TEXT_XML_CHARSET_UTF8)


def as_text_javascript_charset_utf8() -> Option:
    return add_content_type(mime.MIME_TEXT_JAVASCRIPT_CHARSET_UTF8)


def as_application_json_charset_utf8() -> Option:
    return add_content_type(mime.MIME_APPLICATION_JSON_CHARSET_UTF8)


def as_application_javascript_charset_utf8() -> Option:
    return add_content_type(mime.MIME_APPLICATION_JAVASCRIPT_CHARSET_UTF8)


def as_application_xml_charset_utf8() -> Option:
    return add_content_type(mime.MIME_APPLICATION_XML_CHARSET_UTF8)
