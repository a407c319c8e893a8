"""Status code classification."""

from enum import Enum

from gemfetch.protocol.errors import UnknownStatusError


class StatusCategory(str, Enum):
    """Coarse category of a Gemini status code, keyed by its first digit.

    - INPUT (1x): Server asks for a line of user input
    - SUCCESS (2x): Body follows, meta is the MIME type
    - REDIRECT (3x): Meta is the new target URL
    - TEMPORARY_FAILURE (4x): Request may succeed if retried later
    - PERMANENT_FAILURE (5x): Request will not succeed as is
    - CLIENT_CERTIFICATE_REQUIRED (6x): Server wants a client certificate
    """

    INPUT = "INPUT"
    SUCCESS = "SUCCESS"
    REDIRECT = "REDIRECT"
    TEMPORARY_FAILURE = "TEMPORARY_FAILURE"
    PERMANENT_FAILURE = "PERMANENT_FAILURE"
    CLIENT_CERTIFICATE_REQUIRED = "CLIENT_CERTIFICATE_REQUIRED"


_CATEGORY_BY_DIGIT: dict[str, StatusCategory] = {
    "1": StatusCategory.INPUT,
    "2": StatusCategory.SUCCESS,
    "3": StatusCategory.REDIRECT,
    "4": StatusCategory.TEMPORARY_FAILURE,
    "5": StatusCategory.PERMANENT_FAILURE,
    "6": StatusCategory.CLIENT_CERTIFICATE_REQUIRED,
}


def classify(status: str) -> StatusCategory:
    """Classify a status code by its first character.

    The second character is a protocol subcode and is not inspected.

    Args:
        status: Two-character status code.

    Returns:
        The status category.

    Raises:
        UnknownStatusError: If the first character is not 1-6.
    """
    category = _CATEGORY_BY_DIGIT.get(status[:1])
    if category is None:
        raise UnknownStatusError(status)
    return category
