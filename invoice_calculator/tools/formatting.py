import logging
from datetime import datetime

logger = logging.getLogger(__name__)

CENTS_PER_DOLLAR = 100
DEFAULT_CURRENCY_VALUE = "$0.00"

INPUT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"
OUTPUT_DATE_FORMAT = "%b %d, %Y"

DEFAULT_SHORT_ID_LENGTH = 8


def format_currency(cents: int) -> str:
    """
    Render minor units as a dollar amount, e.g. 123456 -> "$1,234.56".
    Integer arithmetic only; negative amounts render as "-$12.34".
    """
    sign = "-" if cents < 0 else ""
    dollars, remainder = divmod(abs(cents), CENTS_PER_DOLLAR)
    return f"{sign}${dollars:,}.{remainder:02d}"


def format_invoice_date(value: str) -> str:
    """
    Convert "2022-10-01T10:22:32" to "Oct 01, 2022".
    Never fails: anything that does not parse is returned unchanged.
    """
    try:
        parsed = datetime.strptime(value, INPUT_DATE_FORMAT)
    except (TypeError, ValueError) as e:
        logger.warning(f"Failed to parse date {value!r}: {e}")
        return value
    return parsed.strftime(OUTPUT_DATE_FORMAT)


def short_id(identifier: str, length: int = DEFAULT_SHORT_ID_LENGTH) -> str:
    if len(identifier) <= length:
        return identifier
    return identifier[:length]
