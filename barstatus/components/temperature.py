"""Temperature from a thermal sensor file."""

from barstatus.util import read_int


def temp(file):
    """Return the temperature in whole degrees Celsius from a millidegree file."""
    value = read_int(file)
    if value is None:
        return None
    degrees = abs(value) // 1000
    return str(-degrees if value < 0 else degrees)