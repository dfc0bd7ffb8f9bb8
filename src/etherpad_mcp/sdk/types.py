"""
Etherpad-Lite API types, enums, and constants.

All Etherpad-specific codes and magic values live here.
See https://etherpad.org/doc/v1.8.18/#index_http_api for the reference.
"""

from enum import IntEnum


# Version of the HTTP API this binding targets
CURRENT_VERSION = "1.2.13"

DEFAULT_BASE_URL = "http://localhost:9001/api"

# Name of the query parameter carrying the API key
API_KEY_PARAM = "apikey"


class ReturnCode(IntEnum):
    """Status codes sent in the `code` field of every API response."""
    OK = 0
    WRONG_PARAMETERS = 1
    INTERNAL_ERROR = 2
    NO_SUCH_FUNCTION = 3
    WRONG_API_KEY = 4


_CODE_DESCRIPTIONS = {
    ReturnCode.OK: "everything ok",
    ReturnCode.WRONG_PARAMETERS: "wrong parameters",
    ReturnCode.INTERNAL_ERROR: "internal error",
    ReturnCode.NO_SUCH_FUNCTION: "no such function",
    ReturnCode.WRONG_API_KEY: "no or wrong API Key",
}


def describe_code(code: int) -> str:
    """Render a return code as text, e.g. "4 no or wrong API Key".

    Codes outside ReturnCode are rendered generically.
    """
    try:
        description = _CODE_DESCRIPTIONS[ReturnCode(code)]
    except ValueError:
        description = "unknown return code"
    return f"{int(code)} {description}"
