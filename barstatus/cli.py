"""Command line entry point: build the status line and publish it."""

import shutil
import signal
import subprocess
import sys
import threading
import time
from dataclasses import dataclass

from barstatus.config import INTERVAL, MAXLEN, UNKNOWN_STR, default_args
from barstatus.util import warn

PROG = "barstatus"
VERSION = "1.0"
USAGE = f"usage: {PROG} [-v] [-s] [-1]"


class CliError(Exception):
    """A fatal condition: the message is printed and the program exits with 1."""


@dataclass
class Options:
    """Parsed command line options."""

    to_stdout: bool = False
    once: bool = False
    interval: int = INTERVAL


def parse_args(argv):
    """Parse the arguments that follow the program name.

    Flags may be clustered ('-s1'); '--' ends the options. Any operand or
    unknown flag is a usage error, and '-v' reports the version.
    """
    options = Options()
    remaining = list(argv)
    while remaining and remaining[0].startswith("-") and len(remaining[0]) > 1:
        arg = remaining.pop(0)
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                raise CliError(f"{PROG}-{VERSION}")
            if flag == "1":
                options.once = True
                options.to_stdout = True
            elif flag == "s":
                options.to_stdout = True
            else:
                raise CliError(USAGE)
    if remaining:
        raise CliError(USAGE)
    return options


def _format(fmt, value):
    try:
        return fmt % (value,)
    except TypeError:
        return fmt % ()


def render_status(args, unknown=UNKNOWN_STR, maxlen=MAXLEN):
    """Join the formatted results of all entries into one status line.

    An entry whose component yields nothing shows ``unknown``. Output stops
    before the first entry that would not fit in ``maxlen`` characters
    (one of which is reserved for the terminator).
    """
    parts = []
    length = 0
    for arg in args:
        value = arg.func(arg.args)
        if value is None:
            value = unknown
        piece = _format(arg.fmt, value)
        if len(piece) >= maxlen - length:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += len(piece)
    return "".join(parts)


class _RootWindow:
    """Sets the name of the X root window, where the bar reads its status."""

    def __init__(self):
        self._tool = shutil.which("xsetroot")
        if self._tool is None:
            raise CliError("XOpenDisplay: Failed to open display")

    def store(self, name):
        try:
            subprocess.run(
                [self._tool, "-name", name],
                check=True,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except (OSError, subprocess.CalledProcessError) as exc:
            raise CliError(f"XStoreName: {exc}") from exc


class _Signals:
    """Installs the termination and refresh handlers for the duration of a run."""

    def __init__(self):
        self.stop = threading.Event()
        self.wake = threading.Event()
        self._saved = {}

    def _terminate(self, signo, frame):
        self.stop.set()
        self.wake.set()

    def _refresh(self, signo, frame):
        self.wake.set()

    def __enter__(self):
        if threading.current_thread() is threading.main_thread():
            handlers = {
                signal.SIGINT: self._terminate,
                signal.SIGTERM: self._terminate,
            }
            if hasattr(signal, "SIGUSR1"):
                handlers[signal.SIGUSR1] = self._refresh
            for signo, handler in handlers.items():
                self._saved[signo] = signal.signal(signo, handler)
        return self

    def __exit__(self, *exc_info):
        for signo, handler in self._saved.items():
            signal.signal(signo, handler)
        self._saved.clear()
        return False


def run(options, args=None, out=None):
    """Publish the status line until told to stop, or once with ``options.once``."""
    if args is None:
        args = default_args()
    if out is None:
        out = sys.stdout

    root = None if options.to_stdout else _RootWindow()

    with _Signals() as signals:
        try:
            while True:
                start = time.monotonic()
                status = render_status(args, UNKNOWN_STR, MAXLEN)

                if options.to_stdout:
                    try:
                        print(status, file=out)
                        out.flush()
                    except (OSError, ValueError) as exc:
                        raise CliError(f"puts: {exc}") from exc
                else:
                    root.store(status)

                if options.once or signals.stop.is_set():
                    break

                wait = options.interval / 1000 - (time.monotonic() - start)
                if wait >= 0:
                    signals.wake.wait(wait)
                    signals.wake.clear()

                if signals.stop.is_set():
                    break
        finally:
            if root is not None:
                root.store("")


def main(argv=None):
    """Run the status monitor; return the exit status."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        options = parse_args(argv)
        run(options)
    except CliError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())