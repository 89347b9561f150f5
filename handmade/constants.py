"""Size helpers and the fixed audio settings of the game."""

from __future__ import annotations


def kib(n: int) -> int:
    """Return ``n`` kibibytes in bytes."""
    return 1024 * n


def mib(n: int) -> int:
    """Return ``n`` mebibytes in bytes."""
    return 1024 * kib(n)


def gib(n: int) -> int:
    """Return ``n`` gibibytes in bytes."""
    return 1024 * mib(n)


def tib(n: int) -> int:
    """Return ``n`` tebibytes in bytes."""
    return 1024 * gib(n)


# A sample is a signed 16-bit little-endian integer.
SAMPLE_BYTES = 2
SAMPLE_MAX = 32767
SAMPLE_MIN = -32768

# Signed 16-bit samples, in the mixer's size convention.
AUDIO_FORMAT = -16

# "Frame" here means an audio frame: one sample per channel.
SAMPLE_RATE_KHZ = 48
NCHANNELS = 2
NUM_SDL_AUDIO_BUFFER_FRAMES = 2048
MAX_QUEUED_AUDIO_MS = 10000

# Size of the queue buffer in samples (about 5.5 s of 48 kHz 16-bit stereo).
AUDIO_BUFFER_SAMPLES = 262144

BYTES_PER_FRAME = SAMPLE_BYTES * NCHANNELS
AUDIO_BUFFER_BYTES = AUDIO_BUFFER_SAMPLES * BYTES_PER_FRAME
SAMPLE_RATE_HZ = SAMPLE_RATE_KHZ * 1000
BYTES_PER_MS = BYTES_PER_FRAME * SAMPLE_RATE_KHZ
AUDIO_BUFFER_MS = AUDIO_BUFFER_BYTES // BYTES_PER_MS