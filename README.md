# barstatus

`barstatus` builds one line of system information (CPU use, memory use, date
and time by default) and publishes it again every second. It either sets the
name of the X root window, where a status bar can read it, or prints the line
to standard output.

## Installation

```
pip install .
```

The only runtime dependency is `psutil`. Running without `-s` or `-1` also
needs the `xsetroot` program on `PATH`.

## Usage

```
barstatus         # set the X root window name every interval (uses xsetroot)
barstatus -s      # print a status line to standard output every interval
barstatus -1      # print a single status line to standard output and exit
barstatus -v      # print "barstatus-1.0" to standard error and exit with status 1
```

Flags may be grouped (`-s1`) and `--` ends the options. Any other flag or any
operand prints `usage: barstatus [-v] [-s] [-1]` and exits with status 1. If
`xsetroot` cannot be found, the command fails with
`XOpenDisplay: Failed to open display`.

`SIGINT` and `SIGTERM` stop the loop cleanly; when the root window was being
set, its name is cleared on the way out. `SIGUSR1` triggers an update straight
away. The interval is 1000 ms (`barstatus.config.INTERVAL`).

## Components

Every component is a function whose first argument is the entry's argument
(a path, an interface name, a format, or unused) and which returns a string,
or `None` when it cannot get a value. Failures are reported on standard error
through `barstatus.util.warn`; in the status line, `None` shows up as `n/a`.

| Module                             | Public names                                                |
|------------------------------------|-------------------------------------------------------------|
| `barstatus.components.battery`     | `battery_perc`, `battery_state`, `battery_remaining`        |
| `barstatus.components.cpu`         | `cpu_freq`, `cpu_perc`, `CpuMeter`                          |
| `barstatus.components.clock`       | `datetime`                                                  |
| `barstatus.components.disk`        | `disk_free`, `disk_perc`, `disk_total`, `disk_used`         |
| `barstatus.components.entropy`     | `entropy`                                                   |
| `barstatus.components.files`       | `cat`, `num_files`                                          |
| `barstatus.components.system`      | `hostname`, `kernel_release`, `load_avg`, `uptime`, `format_uptime`, `gid`, `uid`, `username` |
| `barstatus.components.network`     | `ipv4`, `ipv6`, `netspeed_rx`, `netspeed_tx`, `NetSpeed`    |
| `barstatus.components.memory`      | `parse_meminfo`, `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `barstatus.components.temperature` | `temp`                                                      |
| `barstatus.components.command`     | `run_command`                                               |
| `barstatus.components.volume`      | `vol_perc`, `mixer_read_request`                            |
| `barstatus.components.wifi`        | `wifi_perc`, `wifi_essid`, `rssi_to_perc`, `parse_wireless_link` |

Some notes on behaviour:

- `cpu_perc`, `netspeed_rx` and `netspeed_tx` compare with the previous call,
  so the first call returns `None`. `CpuMeter(stat_path)` and
  `NetSpeed(direction, interval, root)` give independent meters.
- `battery_*` read `/sys/class/power_supply/<name>/`; `battery_state` returns
  `+`, `-`, `o` or `?`; `battery_remaining` returns `Hh Mm` while discharging
  and `""` otherwise.
- `temp` reads a millidegree sensor file and returns whole degrees Celsius.
- `run_command` runs its argument in the shell and returns the first line of
  its output.
- `vol_perc` reads the `vol` channel of an OSS mixer device such as `/dev/mixer`.
- `wifi_perc` reads `/sys/class/net/<iface>/operstate` and `/proc/net/wireless`;
  `wifi_essid` queries the Linux wireless extensions.

## Configuration

The default line comes from `barstatus.config.default_args()`: CPU usage, RAM
usage, the date (`%a %b %-d`) and the time (`%l:%M %p`), with colour markers of
the form `^c#rrggbb^`. Each `barstatus.config.Arg` holds a component function
(`func`), a `%`-style format string with one `%s` for the value (`fmt`), and
the argument passed to the function (`args`).

To build a line from your own entries, call
`barstatus.cli.render_status(args, unknown, maxlen)`. It stops before the
first entry that would not fit in `maxlen - 1` characters:

```python
from barstatus.cli import render_status
from barstatus.components.system import load_avg
from barstatus.config import Arg, default_args

entries = default_args() + (Arg(load_avg, " load %s"),)
print(render_status(entries, "n/a", 2048))
```

`barstatus.cli.run(options, args, out)` runs the loop with a
`barstatus.cli.Options` and your own entries; `barstatus.cli.parse_args(argv)`
builds the options from command-line flags.

Sizes are shown with one decimal and binary prefixes (`Ki`, `Mi`, `Gi`, ...)
through `barstatus.util.fmt_human(num, base)`, which also accepts base 1000 and
raises `ValueError` for any other base.

## What it does not do

- There are no keyboard-indicator or keymap components.
- The interval cannot be changed from the command line; change
  `Options.interval` when calling `run` yourself.
- The root window name is set by running `xsetroot -name`, not by talking to
  the X server directly.
- The components read Linux interfaces (`/proc`, `/sys`, wireless ioctls, OSS
  mixer); only `entropy` has a BSD answer (`∞`).