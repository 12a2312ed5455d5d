"""Constants for HTTP status codes and their default messages.

The message table backs the error envelope when no explicit message is given.
"""

from http import HTTPStatus

# Reserved value meaning "no status chosen yet"; never a valid HTTP status.
STATUS_UNDEFINED = 0

HTTP_200_OK = 200
HTTP_204_NO_CONTENT = 204
HTTP_300_MULTIPLE_CHOICES = 300
HTTP_302_FOUND = 302
HTTP_308_PERMANENT_REDIRECT = 308
HTTP_404_NOT_FOUND = 404
HTTP_500_INTERNAL_SERVER_ERROR = 500

STATUS_MESSAGES: dict[int, str] = {status.value: status.phrase for status in HTTPStatus}

NOT_FOUND_BODY = "404 page not found\n"


def status_message(code: int) -> str:
    """Return the default reason text for ``code`` (empty for unknown codes)."""
    return STATUS_MESSAGES.get(code, "")
