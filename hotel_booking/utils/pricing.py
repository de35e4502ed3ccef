import math
from datetime import timedelta

ONE_NIGHT = timedelta(days=1)


def count_nights(check_in, check_out):
    """Number of nights billed for a stay, rounding partial days up.

    Zero or negative when check_out does not come after check_in.
    """
    return math.ceil((check_out - check_in) / ONE_NIGHT)


def calculate_total_price(nightly_price, check_in, check_out):
    """
    Price of a stay at the room's current nightly rate.
    Raises ValueError when the stay is not at least one night.
    """
    nights = count_nights(check_in, check_out)
    if nights <= 0:
        raise ValueError("Invalid dates")
    return nightly_price * nights
