"""CPU frequency and usage."""

from barstatus.util import fmt_human, read_int, read_line

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"


class CpuMeter:
    """Tracks successive samples of the aggregate CPU line of /proc/stat."""

    def __init__(self, stat_path=PROC_STAT):
        self.stat_path = stat_path
        self._previous = None

    def _read(self):
        line = read_line(self.stat_path)
        if line is None:
            return None
        fields = line.split()[1:8]
        if len(fields) != 7:
            return None
        try:
            return [float(value) for value in fields]
        except ValueError:
            return None

    def sample(self):
        """Return usage since the last sample in percent, or None on the first."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous is None or previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None

        # user, nice, system, irq, softirq count as busy time
        busy_indices = (0, 1, 2, 5, 6)
        busy = sum(previous[i] for i in busy_indices) - sum(
            current[i] for i in busy_indices
        )
        return str(int(100 * busy / total))


_METER = CpuMeter()


def cpu_freq(unused=None, path=CPU_FREQ):
    """Return the current frequency of the first CPU."""
    khz = read_int(path)
    if khz is None:
        return None
    return fmt_human(khz * 1000, 1000)


def cpu_perc(unused=None):
    """Return the CPU usage since the previous call."""
    return _METER.sample()