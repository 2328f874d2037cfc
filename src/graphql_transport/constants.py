"""Constants shared across the GraphQL transport."""

JSON_MEDIA_TYPE = "application/json"
CONTENT_TYPE_HEADER = "Content-Type"

PERSISTED_QUERY_VERSION = 1

# Query parameter names used by persisted (GET) requests
VARIABLES_PARAM = "variables"
EXTENSIONS_PARAM = "extensions"

ALLOWED_SCHEMES = ("http", "https")

DEFAULT_TEXT_ENCODING = "utf-8"
EMPTY_BODY_DESCRIPTION = "Empty response body"
UNREADABLE_BODY_DESCRIPTION = "Unreadable response body"
UNKNOWN_STATUS_DESCRIPTION = "Unknown Status"
