"""Audio output: a byte queue fed with generated tones and drained by the device."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from handmade.constants import (
    AUDIO_FORMAT,
    BYTES_PER_MS,
    MAX_QUEUED_AUDIO_MS,
    NCHANNELS,
    NUM_SDL_AUDIO_BUFFER_FRAMES,
    SAMPLE_RATE_HZ,
    SAMPLE_RATE_KHZ,
)
from handmade.wave_generators import SineWaveGenerator, SquareWaveGenerator, WaveGenerator

logger = logging.getLogger(__name__)


class _ByteQueue:
    """Thread-safe FIFO of audio bytes, drained by the device callback."""

    def __init__(self) -> None:
        self._data = bytearray()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def push(self, data: bytes | bytearray | memoryview) -> None:
        with self._lock:
            self._data += data

    def fill(self, stream: memoryview) -> None:
        """Copy queued bytes into ``stream``, padding with silence."""
        out = stream.cast("B")
        wanted = len(out)
        with self._lock:
            chunk = bytes(self._data[:wanted])
            del self._data[:wanted]
        out[: len(chunk)] = chunk
        out[len(chunk):] = bytes(wanted - len(chunk))


def render_square_wave(generator: WaveGenerator, tone_hz: float, duration_ms: int) -> bytes:
    """Render ``duration_ms`` of a tone as interleaved 16-bit little-endian frames."""
    if tone_hz <= 0:
        raise ValueError("tone frequency must be greater than 0")
    if duration_ms < 0:
        raise ValueError("duration must not be negative")
    num_frames = duration_ms * SAMPLE_RATE_KHZ
    # The generator period is counted in audio frames.
    generator.period = int(SAMPLE_RATE_HZ / tone_hz)
    samples = np.fromiter(
        (generator.next() for _ in range(num_frames)),
        dtype=np.int16,
        count=num_frames,
    )
    return np.repeat(samples, NCHANNELS).astype("<i2").tobytes()


@dataclass
class AudioState:
    """The output device, its pending bytes and the tone generators."""

    device: Any = None
    paused: bool = False
    buffer: _ByteQueue = field(default_factory=_ByteQueue)
    sine_gen1: SineWaveGenerator = field(default_factory=lambda: SineWaveGenerator(1024, 0.01))
    square_gen1: SquareWaveGenerator = field(
        default_factory=lambda: SquareWaveGenerator(1024, 0.01)
    )

    def queued_ms(self) -> int:
        """Whole milliseconds of audio waiting to be played."""
        return len(self.buffer) // BYTES_PER_MS

    def queue_audio(self, data: bytes | bytearray | memoryview) -> None:
        """Append raw frames to the playback queue."""
        self.buffer.push(data)

    def queue_square_wave(self, tone_hz: float, duration_ms: int) -> bool:
        """Queue a square tone; return False if it would overfill the queue."""
        if self.queued_ms() + duration_ms > MAX_QUEUED_AUDIO_MS:
            return False
        if duration_ms > 0:
            logger.log(5, "Will queue %d ms of %s hz square wave", duration_ms, tone_hz)
            self.queue_audio(render_square_wave(self.square_gen1, tone_hz, duration_ms))
        return True

    def pause(self, pause: bool) -> None:
        """Pause or resume playback."""
        if self.device is not None:
            self.device.pause(1 if pause else 0)
        self.paused = pause

    def _on_audio(self, _device: Any, stream: memoryview) -> None:
        self.buffer.fill(stream)


def init_audio() -> AudioState:
    """Open the default output device and start playback."""
    import pygame
    from pygame._sdl2.audio import AUDIO_S16, AudioDevice, get_audio_device_names

    pygame.mixer.init(
        frequency=SAMPLE_RATE_HZ,
        size=AUDIO_FORMAT,
        channels=NCHANNELS,
        buffer=NUM_SDL_AUDIO_BUFFER_FRAMES,
    )
    names = get_audio_device_names(False)
    if not names:
        raise RuntimeError("no audio output device available")

    state = AudioState()
    state.device = AudioDevice(
        devicename=names[0],
        iscapture=False,
        frequency=SAMPLE_RATE_HZ,
        audioformat=AUDIO_S16,
        numchannels=NCHANNELS,
        chunksize=NUM_SDL_AUDIO_BUFFER_FRAMES,
        allowed_changes=0,
        callback=state._on_audio,
    )
    print(f"Initialised Audio: {SAMPLE_RATE_HZ} Hz, {NCHANNELS} Channels")
    state.pause(False)
    return state