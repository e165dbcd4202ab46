"""
Miscellaneous utility helper functions.
Date/time parsing and formatting shared by models, routes and templates.
"""

import unicodedata
from datetime import datetime

# Accepted form formats for a reservation start time
START_AT_INPUT_FORMATS = [
    '%Y-%m-%dT%H:%M',
    '%Y-%m-%dT%H:%M:%S',
    '%Y-%m-%d %H:%M',
    '%Y-%m-%d %H:%M:%S',
]


def fold_case(text):
    """
    Normalize text for case-insensitive comparison, including non-ASCII letters.

    Examples:
        'Álvarez' -> 'álvarez'
        'STRASSE' and 'Straße' -> 'strasse'
    """
    if text is None:
        return None
    return unicodedata.normalize('NFC', str(text)).casefold()


def ordinal(day: int) -> str:
    """
    English ordinal for a day of the month.

    Examples:
        1 -> '1st', 12 -> '12th', 22 -> '22nd'
    """
    if 11 <= day % 100 <= 13:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')
    return f'{day}{suffix}'


def format_start_at(value: datetime) -> str:
    """
    Format a reservation start time for display.

    Args:
        value: Start datetime

    Returns:
        Text like 'May 1st 2024, 6:30 pm', or '' when there is no value
    """
    if not value:
        return ''

    hour = value.hour % 12 or 12
    meridiem = 'am' if value.hour < 12 else 'pm'
    return f'{value:%B} {ordinal(value.day)} {value.year}, {hour}:{value:%M} {meridiem}'


def format_datetime_local(value: datetime) -> str:
    """Format a datetime as an HTML datetime-local value (YYYY-MM-DDTHH:MM)."""
    if not value:
        return ''
    return value.strftime('%Y-%m-%dT%H:%M')


def parse_start_at(value: str):
    """
    Parse a start time submitted from a form.

    Args:
        value: Date and time text

    Returns:
        datetime, or None if the text is empty or not in an accepted format
    """
    if not value:
        return None

    for input_format in START_AT_INPUT_FORMATS:
        try:
            return datetime.strptime(value.strip(), input_format)
        except ValueError:
            continue

    return None
