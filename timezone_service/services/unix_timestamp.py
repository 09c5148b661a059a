import re

from shared.constants import (
    MAX_PLAUSIBLE_EPOCH_MILLIS,
    MILLIS_PER_SECOND,
    MIN_PLAUSIBLE_EPOCH_MILLIS,
    UNIX_SECONDS_DIGITS,
)
from shared.core.exceptions import UnparseableInput

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def parse_unix_timestamp(text: str) -> int:
    """
    Epoch millis from user input in seconds or milliseconds.

    Exactly ten digits are read as seconds, every other length as
    milliseconds. Raises UnparseableInput for non-integers and for values
    outside years 1-9999.
    """
    raw = (text or "").strip()
    if not _INTEGER_PATTERN.match(raw):
        raise UnparseableInput(
            "Timestamp must be an integer", details={"value": text}
        )

    value = int(raw)
    digits = raw.lstrip("+-")
    millis = value
    if len(digits) == UNIX_SECONDS_DIGITS:
        millis = value * MILLIS_PER_SECOND

    if not MIN_PLAUSIBLE_EPOCH_MILLIS <= millis <= MAX_PLAUSIBLE_EPOCH_MILLIS:
        raise UnparseableInput(
            "Timestamp is out of range", details={"value": text}
        )
    return millis
