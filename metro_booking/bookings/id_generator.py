import secrets
import time

BOOKING_ID_LENGTH = 10


def generate_booking_id() -> str:
    """Fixed-width booking id: millisecond clock followed by three random digits.

    Only the trailing digits are kept, so two ids minted in the same
    millisecond differ in their random suffix at best; the repository's
    primary key remains the final uniqueness check.
    """
    millis = time.time_ns() // 1_000_000
    suffix = secrets.randbelow(1000)
    return f"{millis}{suffix:03d}"[-BOOKING_ID_LENGTH:]
