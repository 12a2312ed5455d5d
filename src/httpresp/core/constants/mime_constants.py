"""Constants for MIME types used as default and explicit content types."""

MIME_TEXT_XML = "text/xml"
MIME_TEXT_HTML = "text/html"
MIME_TEXT_PLAIN = "text/plain"
MIME_TEXT_JAVASCRIPT = "text/javascript"
MIME_APPLICATION_XML = "application/xml"
MIME_APPLICATION_JSON = "application/json"
MIME_APPLICATION_JAVASCRIPT = "application/javascript"
MIME_APPLICATION_FORM = "application/x-www-form-urlencoded"
MIME_OCTET_STREAM = "application/octet-stream"
MIME_MULTIPART_FORM = "multipart/form-data"

MIME_TEXT_XML_CHARSET_UTF8 = "text/xml; charset=utf-8"
MIME_TEXT_HTML_CHARSET_UTF8 = "text/html; charset=utf-8"
MIME_TEXT_PLAIN_CHARSET_UTF8 = "text/plain; charset=utf-8"
MIME_TEXT_JAVASCRIPT_CHARSET_UTF8 = "text/javascript; charset=utf-8"
MIME_APPLICATION_XML_CHARSET_UTF8 = "application/xml; charset=utf-8"
MIME_APPLICATION_JSON_CHARSET_UTF8 = "application/json; charset=utf-8"
MIME_APPLICATION_JAVASCRIPT_CHARSET_UTF8 = "application/javascript; charset=utf-8"
