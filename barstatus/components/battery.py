"""Battery charge, state and remaining time from the power-supply class."""

import os
import re

from barstatus.util import read_int, read_line

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_STATUS = re.compile(r"[A-Za-z ]{1,12}")


def _read_status(directory):
    line = read_line(os.path.join(directory, "status"))
    if line is None:
        return None
    match = _STATUS.match(line)
    return match.group(0) if match else None


def _pick(directory, first, second):
    for name in (first, second):
        path = os.path.join(directory, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat, root=POWER_SUPPLY):
    """Return the battery capacity in percent."""
    capacity = read_int(os.path.join(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat, root=POWER_SUPPLY):
    """Return '+' when charging, '-' when discharging, 'o' when full, '?' otherwise."""
    state = _read_status(os.path.join(root, bat))
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat, root=POWER_SUPPLY):
    """Return the remaining time as 'Hh Mm' while discharging, '' otherwise."""
    directory = os.path.join(root, bat)
    state = _read_status(directory)
    if state is None:
        return None

    charge_path = _pick(directory, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = read_int(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    current_path = _pick(directory, "current_now", "power_now")
    if current_path is None:
        return None
    current_now = read_int(current_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"