"""Small formatting helpers."""


def format_byte_size(b: int) -> str:
    """Format a byte count with decimal (power of 1000) units."""
    unit = 1000
    if b < unit:
        return f"{b} B"
    div, exp = unit, 0
    n = b // unit
    while n >= unit:
        div *= unit
        exp += 1
        n //= unit
    return f"{b / div:.1f} {'kMGTPE'[exp]}B"