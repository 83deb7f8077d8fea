"""Master volume from an OSS mixer device."""

import fcntl
import os
import struct

from barstatus.util import warn

SOUND_DEVICE_NAMES = (
    "vol", "bass", "treble", "synth", "pcm", "speaker", "line", "mic",
    "cd", "mix", "pcm2", "rec", "igain", "ogain", "line1", "line2",
    "line3", "dig1", "dig2", "dig3", "phin", "phout", "video", "radio",
    "monitor",
)

_INT_SIZE = struct.calcsize("i")
_IOC_READ = 2
_VOL = SOUND_DEVICE_NAMES.index("vol")


def _mixer_ior(number):
    return (_IOC_READ << 30) | (_INT_SIZE << 16) | (ord("M") << 8) | number


SOUND_MIXER_READ_DEVMASK = _mixer_ior(0xFE)


def mixer_read_request(channel):
    """Return the ioctl request that reads the level of a mixer channel."""
    return _mixer_ior(channel)


def _ioctl_int(fd, request):
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card):
    """Return the master volume of a mixer device in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError:
        warn(f"open '{card}':")
        return None

    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError:
            warn("ioctl 'SOUND_MIXER_READ_DEVMASK':")
            return None
        if not devmask & (1 << _VOL):
            return None
        try:
            level = _ioctl_int(fd, mixer_read_request(_VOL))
        except OSError:
            warn(f"ioctl 'MIXER_READ({_VOL})':")
            return None
    finally:
        os.close(fd)

    return str(level & 0xFF)