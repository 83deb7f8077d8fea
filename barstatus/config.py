"""Default status line configuration."""

from dataclasses import dataclass
from typing import Callable, Optional

from barstatus.components.clock import datetime
from barstatus.components.cpu import cpu_perc
from barstatus.components.memory import ram_perc

INTERVAL = 1000
UNKNOWN_STR = "n/a"
MAXLEN = 2048


@dataclass(frozen=True)
class Arg:
    """One status entry: a component, a printf-style format and its argument."""

    func: Callable[[Optional[str]], Optional[str]]
    fmt: str
    args: Optional[str] = None


def default_args():
    """Return the entries of the default status line, in display order."""
    return (
        Arg(cpu_perc, "^c#d791a8^  CPU: ^c#FFFFFF^%s%%", None),
        Arg(ram_perc, "^c#d791a8^  RAM: ^c#FFFFFF^%s%%", None),
        Arg(datetime, "^c#d791a8^  %s", "%a %b %-d"),
        Arg(datetime, "^c#FFFFFF^ %s", "%l:%M %p  "),
    )