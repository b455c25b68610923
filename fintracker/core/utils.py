"""
Core utilities: ID normalization, amount parsing, document encoding
"""
import re
from datetime import date, datetime
from typing import Any, Union


def to_float(value: Any) -> float:
    """
    Extracts the numeric value of any text, ignoring currency symbols and letters.
    Examples:
    "$ 50.00" -> 50.0
    "-12.5" -> -12.5
    "1,250.75" -> 1250.75
    "1,250" -> 1250.0
    "1.250,75" -> 1250.75
    "12,5" -> 12.5
    """
    if value is None:
        return 0.0

    if isinstance(value, (float, int)):
        return float(value)

    text = str(value).strip()

    match = re.search(r'-?[\d.,]+', text)

    if not match:
        return 0.0

    clean_num = match.group(0)

    # Comma is the decimal separator only after the last dot and before 1-2 digits;
    # "1,250" is US thousands grouping
    last_comma = clean_num.rfind(",")
    decimals = len(clean_num) - last_comma - 1
    if last_comma > clean_num.rfind(".") and 1 <= decimals <= 2:
        clean_num = clean_num.replace(".", "")
        clean_num = clean_num.replace(",", ".")
    else:
        clean_num = clean_num.replace(",", "")

    try:
        return float(clean_num)
    except ValueError:
        return 0.0


def ensure_string_id(user_id: Union[str, int]) -> str:
    """
    Guarantees the user id is always a string.
    Firestore document ids must be strings.
    """
    return str(user_id)


def encode_value(value: Any) -> Any:
    """Converts dates nested in a document into values Firestore accepts"""
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, dict):
        return {key: encode_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [encode_value(item) for item in value]
    return value
