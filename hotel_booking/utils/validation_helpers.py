from datetime import timezone


def to_naive_utc(value):
    """Convert an aware datetime to naive UTC; naive values are already UTC."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
