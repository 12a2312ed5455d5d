"""Constants module for httpresp.

Header names, MIME types and status data consumed by the response builder.
"""

# Wildcard re-exports give a single import point for every table.
from .header_constants import *  # noqa: F403
from .http_status_constants import *  # noqa: F403
from .mime_constants import *  # noqa: F403
