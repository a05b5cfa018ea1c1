import secrets
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

def _base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_ALPHABET[remainder])
    return "".join(reversed(digits))

def generate_id() -> str:
    """Millisecond timestamp in base 36 followed by random base-36 characters."""
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_ALPHABET) for _ in range(11))
    return _base36(millis) + suffix
