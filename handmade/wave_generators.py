"""Periodic counters and simple tone generators producing 16-bit samples."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from handmade.constants import SAMPLE_MAX, SAMPLE_MIN


class Phaser:
    """A counter that cycles through ``0 .. period - 1``."""

    def __init__(self, period_ticks: int) -> None:
        if period_ticks <= 0:
            raise ValueError("Period must be greater than 0")
        self._period = period_ticks
        self.phase = 0

    def next(self) -> int:
        """Return the current phase and advance by one tick."""
        self.phase %= self._period
        current = self.phase
        self.phase += 1
        return current

    @property
    def period(self) -> int:
        """Length of one cycle in ticks."""
        return self._period

    @period.setter
    def period(self, new_period: int) -> None:
        if new_period <= 0:
            raise ValueError("Period must be greater than 0")
        self.phase = self.phase * new_period // self._period
        self._period = new_period


class WaveGenerator(ABC):
    """A source of samples with an adjustable volume and period."""

    def __init__(self, volume: float = 0.005) -> None:
        # Keep well below 1.0: full scale is very loud.
        self.volume = volume

    @abstractmethod
    def next(self) -> int:
        """Return the next sample."""

    @property
    @abstractmethod
    def period(self) -> int:
        """Length of one wave cycle in audio frames."""

    @period.setter
    @abstractmethod
    def period(self, new_period: int) -> None:
        ...


class SineWaveGenerator(WaveGenerator):
    """Sine-shaped tone generator."""

    def __init__(self, period_ticks: int, volume: float) -> None:
        super().__init__(volume)
        self.phaser = Phaser(period_ticks)
        self._phase_factor = self._calc_phase_factor()

    def _calc_phase_factor(self) -> float:
        return math.pi * self.phaser.period

    def next(self) -> int:
        phase = self.phaser.next()
        return int(self.volume * SAMPLE_MAX * math.sin(self._phase_factor * phase))

    @property
    def period(self) -> int:
        return self.phaser.period

    @period.setter
    def period(self, new_period: int) -> None:
        self.phaser.period = new_period
        self._phase_factor = self._calc_phase_factor()


class SquareWaveGenerator(WaveGenerator):
    """Square-wave generator with a configurable duty cycle."""

    def __init__(self, period_ticks: int, volume: float, duty_cycle: float = 0.5) -> None:
        super().__init__(volume)
        self.phaser = Phaser(period_ticks)
        self._duty_cycle = 0.5
        self.duty_cycle = duty_cycle

    def _calc_duty_period(self) -> int:
        return int(self._duty_cycle * self.phaser.period)

    def next(self) -> int:
        phase = self.phaser.next()
        if phase < self._duty_subperiod:
            return int(self.volume * SAMPLE_MAX)
        return int(self.volume * SAMPLE_MIN)

    @property
    def period(self) -> int:
        return self.phaser.period

    @period.setter
    def period(self, new_period: int) -> None:
        self.phaser.period = new_period
        self._duty_subperiod = self._calc_duty_period()

    @property
    def duty_cycle(self) -> float:
        """Fraction of each period spent at the high level, in [0, 1]."""
        return self._duty_cycle

    @duty_cycle.setter
    def duty_cycle(self, new_duty_cycle: float) -> None:
        if not 0.0 <= new_duty_cycle <= 1.0:
            raise ValueError("Duty cycle must be in [0,1].")
        self._duty_cycle = new_duty_cycle
        self._duty_subperiod = self._calc_duty_period()