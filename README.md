# asciiviz

ASCII music visualizers that draw one frame of audio data at a time onto an
in-memory character canvas.

Each visualizer takes a frame of audio data, either a frequency spectrum or a
waveform, as a sequence of floats. It draws coloured characters onto a
`Canvas`. You can then look at single cells or render the whole frame as text.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from asciiviz.visualizer import Canvas
from asciiviz.spectrum import VisualizerSpectrum

canvas = Canvas(80, 40)
viz = VisualizerSpectrum(canvas)

viz.update_pre()
viz.update(1 / 60, [0.5] * 80, True)
viz.update_post()

print(canvas.render())
```

## The canvas

`asciiviz.visualizer.Canvas(width=None, height=None)` is a grid of characters,
and each cell also holds a `Color`. If you leave out a size, the terminal's
size is used (`shutil.get_terminal_size`).

- `draw(char, x, y, color)` writes one character. `char` is either a
  one-character string or an integer code page 437 byte. Float positions are
  truncated. Positions off the canvas are ignored.
- `char_at(x, y)` returns the character in a cell, and `color_at(x, y)`
  returns its colour. An empty cell gives a space and `None`. A position off
  the canvas raises `IndexError`.
- `reinit(width, height)` resizes the canvas and empties it. A negative size
  raises `ValueError`. `clear()` blanks every cell.
- `render()` returns the characters as plain text, one line per row. It leaves
  the colours out.
- `cursor_visible` is a plain flag. The visualizers set it to `False`.

`Color` is the sixteen-colour console palette, from `BLACK` (0) to
`WHITE` (15). `AudioDataStyle` is either `WAVEFORM` or `SPECTRUM`.

## Visualizers

`Visualizer` is the abstract base class. It stores `audio_data_size` and
`audio_data_style`. `update_pre()` counts the frames in `frames`.
`update_post()` returns `True`. `ASCIIVisualizer` draws on a canvas: you pass
one in, or a terminal-sized canvas is created. Its `width()` and `height()`
are the canvas size and are never negative. `on_resize(new_width, new_height)`
resizes and clears the canvas.

Every `update(dt, data, is_active)` returns `True`. It raises `IndexError`
when `data` is shorter than the visualizer needs.

| Module                         | Class                    | Data style | Data needed                      |
|--------------------------------|--------------------------|------------|----------------------------------|
| `asciiviz.spectrum`            | `VisualizerSpectrum`     | spectrum   | one value per canvas column      |
| `asciiviz.cirrus`              | `VisualizerCirrus`       | spectrum   | 256 values (`CIRRUS_DATA_SIZE`)  |
| `asciiviz.waveform`            | `VisualizerWaveform`     | waveform   | one value per column at creation |
| `asciiviz.waveform_lite`       | `VisualizerWaveformLite` | waveform   | `data_size` values (1024 default)|
| `asciiviz.particle_visualizer` | `VisualizerParticle`     | waveform   | at least 8 values                |

- **Spectrum**: draws one bar per column, shaded blue, light cyan and grey by
  height. A dim reflection is drawn below a line three fifths of the way down.
- **Cirrus**: builds up spectrum energy that decays over time. It paints that
  energy across the whole screen by walking back and forth through its
  256-slot `workspace`. The starting point drifts four slots per second.
- **Waveform**: draws solid-block bars mirrored around the middle row. If the
  canvas is wider than it was at creation, the bars are centred.
- **Waveform lite**: splits the data into bins of `SCALE_FACTOR` (8) samples.
  It plots one `o` per bin around the middle row, centred horizontally.
  `data_size` must be a positive multiple of 8, or `ValueError` is raised.
- **Particle**: runs two `VisualSystem` fountains. The average of the first
  eight samples pushes them apart and makes them spawn faster. You can pass a
  `random.Random` for repeatable output. `on_resize` also moves both
  fountains back to the centre.

## Particles

`asciiviz.particles` has `Particle`, a dataclass holding `data`, position,
velocity, `life` and `active`. It also has a general
`ParticleSystem(max_particles, life, spawn_delay, loops, default)`:

- `update()` spawns particles if the system loops, moves every particle one
  step and removes the ones whose life has run out. A `spawn_delay` of 0
  fills the system at once. Otherwise it spawns one particle every
  `spawn_delay` updates.
- `add_particle()` creates a particle at the spawn point and returns it.
- `set_pos(x, y)` moves the spawn point.
- Override `adjust_particle`, `on_update_start` and `on_update_end` to change
  how particles are made and drawn.

## Result codes

`asciiviz.audio_errors` lists the audio backend's result codes as
`AudioResult`.

- `error_string(result)` returns the English explanation of a code. Unknown
  codes return `"Unknown error."`.
- `check(result)` returns `AudioResult.OK` for OK and raises `AudioError` for
  any other code.
- An `AudioError` has `result` and `message`, and its `str()` is
  `"NAME: message"`.

## Output plugin interface

`asciiviz.output_plugin` describes a custom audio output.

- `OutputDescription` takes keyword arguments only: a name, a version,
  `polling`, and the callbacks. `get_num_drivers`, `get_driver_info`, `init`
  and `close` are always required. `get_position` and `lock` are also
  required when `polling` is true. A missing callback raises `ValueError`.
  An `api_version` other than `OUTPUT_PLUGIN_VERSION` (3) raises
  `AudioError(PLUGIN_VERSION)`.
- `OutputState` is handed to every callback. It carries `plugin_data` and the
  system hooks.
  - `read_from_mixer`, `copy_port` and `request_reset` raise
    `AudioError(UNSUPPORTED)` when their hook is missing. They raise
    `AudioError` when the hook returns a code other than OK.
  - `alloc(size, align)` and `free(block)` go through the system allocator.
    By default that is a zeroed `bytearray`.
  - `log(level, location, fmt, *args)` formats printf-style. By default it
    writes at debug level to the `asciiviz.output_plugin` logger.
- `Object3DInfo` holds one object's mono buffer, `position`, `gain` (0 to 1),
  `spread` (0 to 360) and `priority` (0 to 1). Values outside those ranges
  raise `ValueError`. `attenuated()` returns the buffer scaled by `gain`.

## What this package does not do

- It does not decode, play or capture audio. You supply the spectrum or
  waveform data yourself.
- It has no command-line player and no main loop. Your code calls
  `update_pre`, `update` and `update_post` for each frame.
- It does not write to a real console. The canvas stays in memory, and
  `render()` gives plain text without colours.