import dataclasses
import datetime as dt

import pytest

from barstatus.components.clock import datetime
from barstatus.components.cpu import cpu_perc
from barstatus.components.memory import ram_perc
from barstatus.config import MAXLEN, UNKNOWN_STR, Arg, default_args


def test_default_components_in_order():
    funcs = [arg.func for arg in default_args()]
    assert funcs == [cpu_perc, ram_perc, datetime, datetime]


def test_default_args_are_independent_copies():
    first = list(default_args())
    first.clear()
    assert len(default_args()) == 4


def test_formats_take_one_value():
    for arg in default_args():
        rendered = arg.fmt % "VALUE"
        assert "VALUE" in rendered
        assert "%s" not in rendered


def test_percent_formats_end_with_sign():
    cpu, ram = default_args()[:2]
    assert (cpu.fmt % "12").endswith("12%")
    assert (ram.fmt % "34").endswith("34%")


def test_unknown_fits_formats():
    for arg in default_args():
        assert UNKNOWN_STR in arg.fmt % UNKNOWN_STR
        assert len(arg.fmt % UNKNOWN_STR) < MAXLEN


def test_date_entry_renders():
    date_arg = default_args()[2]
    assert date_arg.args == "%a %b %-d"
    now = dt.datetime(2024, 1, 1, 9, 5)
    assert date_arg.func(date_arg.args, now) == "Mon Jan 1"


def test_time_entry_renders():
    time_arg = default_args()[3]
    now = dt.datetime(2024, 1, 1, 9, 5)
    assert time_arg.func(time_arg.args, now) == " 9:05 AM  "


def test_arg_is_frozen():
    arg = Arg(cpu_perc, "%s")
    assert arg.args is None
    with pytest.raises(dataclasses.FrozenInstanceError):
        arg.fmt = "x"