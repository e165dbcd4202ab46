"""
Centralized UI messages.
All user-facing flash text in one place for consistency.
"""

MESSAGES = {
    # Success messages
    'customer_created': 'Customer {name} added.',
    'customer_updated': 'Customer {name} updated.',
    'customer_deleted': 'Customer {name} and their reservations were deleted.',
    'reservation_created': 'Reservation added.',
    'reservation_updated': 'Reservation updated.',
    'reservation_deleted': 'Reservation deleted.',

    # Error messages
    'body_required': 'The form was submitted without any data.',
    'invalid_start_at': 'Start time must look like 2024-05-01 18:30.',
}


def get_message(key: str, **kwargs) -> str:
    """
    Get message with optional formatting.

    Args:
        key: Message key
        **kwargs: Format parameters

    Returns:
        Formatted message or key if not found
    """
    message = MESSAGES.get(key, key)
    if kwargs:
        return message.format(**kwargs)
    return message
