# handmade

A small game loop built from the ground up. It opens a resizable
640×480 window titled "Handmade!", paints a colour gradient that shifts
with the position of a simulated point, draws a border and a debug
overlay with the point's position, velocity, acceleration and the elapsed
time, and plays a square-wave tone that rises a little every frame and
wraps back to 30 Hz once it passes 900 Hz.

The arrow keys push the point: holding a key adds to the point's
acceleration, releasing it takes the push away again. Gravity pulls the
point back towards `y = 0` and drag slows it down. Game controllers are
registered when they are connected and removed when they are unplugged;
their button and axis events are printed on the console.

## Installing

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Running

```
handmade
```

The overlay needs the font `fonts/Hack-Regular.ttf` under an asset
directory. The directory is looked up in this order:

1. the `--assets DIR` option: `handmade --assets path/to/assets`
2. the `HANDMADE_ASSET_PATH` environment variable
3. an `assets` directory next to the `handmade` package

If the font is not found, start-up fails with `FileNotFoundError`.
An audio output device is needed too; without one, start-up fails with
`RuntimeError`. Close the window to quit.

The loop steps the physics every 8 ms and draws a frame every 16 ms,
queueing 20 ms of tone per frame and never more than 10 seconds of audio
in total. Every 120 frames it logs how long painting and the whole
audio/video update took.

## Pieces you can use on their own

- `handmade.wave_generators`: `Phaser` counts through `0 .. period - 1`;
  `SineWaveGenerator` and `SquareWaveGenerator` produce 16-bit samples one
  at a time from `next()`, with settable `period`, `volume` and, for the
  square wave, `duty_cycle` (must lie in `[0, 1]`).
- `handmade.audio`: `render_square_wave(generator, tone_hz, duration_ms)`
  returns interleaved stereo 16-bit little-endian frames at 48 kHz.
  `AudioState` holds the playback queue: `queue_square_wave(tone_hz,
  duration_ms)` returns `False` instead of queueing when the queue would
  exceed its cap, `queued_ms()` reports what is waiting, and
  `pause(pause)` pauses or resumes the device. `init_audio()` opens the
  default output device.
- `handmade.world`: `Vec2` is a small immutable vector. `WorldState.update(tick_ms)`
  advances the simulation by one velocity-Verlet step and raises
  `ValueError` if the tick goes backwards. `external_acc(pos, vel)` gives
  the gravity and drag acting on the point.
- `handmade.perf`: `PerfCounter` times `PerfEvent`s. `with
  counter.measure(PerfEvent.PAINT): ...` records one run, and
  `counter.last_ms(event)` reports how long the last one took, or
  `NO_EVENT` (-2.0) if it never started and `NOT_FINISHED` (-1.0) if it has
  not ended.
- `handmade.video`: `paint_gradient(pos, width, height)` builds the
  gradient frame as a `(height, width, 3)` array, and
  `format_debug_text(world)` builds the text of the overlay.
- `handmade.inputs`: `InputState` keeps the connected controllers and
  turns key presses into the world's `user_intent`; events for an unknown
  controller raise `UnknownControllerError`.
- `handmade.events`: `GameState` bundles everything the loop owns, and
  `handle_event(state, event)` applies one pygame event to it.
- `handmade.memory`: `init_memory(persistent_bytes, transient_bytes)`
  maps zeroed memory split into `persistent` and `transient` views; use it
  as a context manager or call `close()`.
- `handmade.resources`: `locate_asset(subpath, asset_root)` resolves a file
  under the asset directory and raises `FileNotFoundError` if it is missing.

## What it does not do

There is no game beyond the moving point: no levels, scoring or saving.
Controller buttons and axes are only reported, they do not move the
point. No assets are shipped with the package; the font has to be
provided as described above. The mapped game memory is reserved but not
used by anything yet.

## Tests

```
pytest
```