"""Library-level constants shared across modules."""
from __future__ import annotations

# Redirects followed before a request fails with TooManyRedirectsError.
MAX_REDIRECTIONS = 5

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded; charset=UTF-8"

USER_AGENT_HEADER = "User-Agent"
CONTENT_TYPE_HEADER = "Content-Type"
CONTENT_LENGTH_HEADER = "Content-Length"
LOCATION_HEADER = "Location"

READ_CHUNK_SIZE = 1024


class RequestMethod:
    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"
