import pytest

from handmade.constants import SAMPLE_MAX, SAMPLE_MIN
from handmade.wave_generators import (
    Phaser,
    SineWaveGenerator,
    SquareWaveGenerator,
    WaveGenerator,
)


def test_phaser_cycles_through_period():
    phaser = Phaser(3)
    assert [phaser.next() for _ in range(7)] == [0, 1, 2, 0, 1, 2, 0]


def test_phaser_rejects_zero_period():
    phaser = Phaser(4)
    with pytest.raises(ValueError):
        phaser.period = 0
    assert phaser.period == 4


def test_phaser_constructor_rejects_zero_period():
    with pytest.raises(ValueError):
        Phaser(0)


def test_phaser_rescales_phase_on_period_change():
    phaser = Phaser(4)
    phaser.next()
    phaser.next()
    assert phaser.phase == 2
    phaser.period = 8
    assert phaser.period == 8
    assert phaser.phase == 2 * 8 // 4


def test_phaser_phase_can_be_set():
    phaser = Phaser(5)
    phaser.phase = 3
    assert phaser.next() == 3
    assert phaser.next() == 4
    assert phaser.next() == 0


def test_wave_generator_is_abstract():
    with pytest.raises(TypeError):
        WaveGenerator(0.1)


def test_square_full_volume_hits_sample_limits():
    gen = SquareWaveGenerator(2, 1.0)
    assert [gen.next() for _ in range(4)] == [SAMPLE_MAX, SAMPLE_MIN, SAMPLE_MAX, SAMPLE_MIN]


def test_square_half_duty_splits_period():
    gen = SquareWaveGenerator(8, 0.01)
    samples = [gen.next() for _ in range(8)]
    assert all(s > 0 for s in samples[:4])
    assert all(s < 0 for s in samples[4:])
    assert len(set(samples[:4])) == 1
    assert len(set(samples[4:])) == 1


def test_square_duty_extremes():
    always_low = SquareWaveGenerator(6, 0.5, 0.0)
    always_high = SquareWaveGenerator(6, 0.5, 1.0)
    assert all(always_low.next() < 0 for _ in range(12))
    assert all(always_high.next() > 0 for _ in range(12))


@pytest.mark.parametrize("bad", [-0.1, 1.5])
def test_square_rejects_bad_duty_cycle(bad):
    gen = SquareWaveGenerator(4, 0.1)
    with pytest.raises(ValueError):
        gen.duty_cycle = bad
    assert gen.duty_cycle == 0.5


def test_square_period_change_updates_shape():
    gen = SquareWaveGenerator(4, 0.2)
    gen.period = 10
    assert gen.period == 10
    samples = [gen.next() for _ in range(10)]
    assert sum(1 for s in samples if s > 0) == 5


def test_square_duty_cycle_setter_changes_high_count():
    gen = SquareWaveGenerator(10, 0.2)
    gen.duty_cycle = 0.3
    assert gen.duty_cycle == 0.3
    samples = [gen.next() for _ in range(10)]
    assert sum(1 for s in samples if s > 0) == int(0.3 * 10)


def test_sine_stays_within_volume():
    volume = 0.25
    gen = SineWaveGenerator(64, volume)
    samples = [gen.next() for _ in range(200)]
    assert all(abs(s) <= volume * SAMPLE_MAX for s in samples)


def test_sine_period_change_is_reflected():
    gen = SineWaveGenerator(16, 0.1)
    gen.period = 32
    assert gen.period == 32
    assert gen.phaser.period == 32