# cnge

The parts of a small 2D game framework that do not need a window or a
graphics card: vector and matrix math, RGBA images and packed-pixel helpers,
WAV and font-metrics parsing, a paced frame loop, keyboard and mouse state,
sprite-sheet coordinates, resources that gather in the background, and a
manager that switches between scenes while showing a loading screen.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `cnge.mathutil` | `mod`, `sign`, `interp`, `interp_squared`, `inv_interp`, `inclusive_range`, `exclusive_range` |
| `cnge.vector` | `Vector` of any size, `Dimension` (`X`, `Y`, `Z`, `W`), `dot`, `angle_between`, `with_length`, `normalized`, `negated`, `projected`, `translated`, `scaled` |
| `cnge.matrix` | Column-major `Matrix` with `from_rows`, `identity`, `column`, `set_identity`; `det` |
| `cnge.color` | `Color` with `from_hex`, `from_bytes` and `invert` |
| `cnge.timer` | `Timer` for one-shot (`update`) and repeating (`update_continual`) countdowns |
| `cnge.aspect` | `Aspect`, which fits a preferred game aspect into a window and works out the viewport |
| `cnge.image` | `Image`, an RGBA byte buffer that reads and writes PNG, with `pixel` and `set_pixel` |
| `cnge.image_util` | Packed `0xRRGGBBAA` helpers: `pix`, `channels`, `mix`, `add_noise`, `luminance`, `mode`, `copy`, `sample_at`, `sample_nearest`, `sample_bilinear` and others |
| `cnge.wav` | `Wav.from_file`, `Wav.from_bytes`, `WavFormat`, `WavError` |
| `cnge.font_data` | `FontData`, the metrics of a bitmap font, and `FontDataError` |
| `cnge.tiles` | `TextureParams`, `TileGrid`, `TileSheet` |
| `cnge.resource` | `Resource`, an abstract base with a gather, load, discard and unload lifecycle |
| `cnge.loader` | `Loader`, which gathers on a background thread and loads on the caller's; `LoadingError` |
| `cnge.input` | `Input`, with key and mouse button states (`Button`) set from events (`Action`) |
| `cnge.loop` | `Loop`, a frame loop paced to a frame rate or unlimited, `Timing`, `frame_time` |
| `cnge.font` | `Font`, a bitmap font resource that lays out text glyph by glyph |
| `cnge.scene` | `Scene`, `LoadScreen`, `SceneSwitch`, `SceneManager` |

## Examples

Vectors and matrices:

```python
from cnge.vector import Vector, dot
from cnge.matrix import Matrix, det

v = Vector(3.0, 4.0)
print(v.length())                   # 5.0
print(dot(v, Vector(1.0, 0.0)))     # 3.0

m = Matrix.from_rows(2, 2, [1, 2, 3, 4])
print(det(m))                       # -2
```

Colours and pixels:

```python
from cnge.color import Color
from cnge.image import Image
from cnge.image_util import pix

print(Color.from_hex(0xFF0000))     # Color(r=1.0, g=0.0, b=0.0, a=1.0)

image = Image.sheet(2, 2)           # transparent black
image.set_pixel(0, 0, pix(255, 0, 0))
print(hex(image.pixel(0, 0)))       # 0xff0000ff
image.write("out.png")
```

Timers:

```python
from cnge.timer import Timer

timer = Timer(1.0, True)
timer.update(0.5)    # False
timer.update(0.5)    # True, and the timer stops
```

A tile from a grid, as width, height, x and y fractions of the texture:

```python
from cnge.tiles import TileGrid

grid = TileGrid(64, 32, 4, 2, 0)
print(grid.sheet(1, 1))   # (0.25, 0.5, 0.25, 0.5)
```

Loading resources in the background:

```python
from cnge.loader import Loader
from cnge.resource import Resource

class Level(Resource):
    def __init__(self, text):
        super().__init__(True)
        self.source = text
        self.text = None
        self.rows = None

    def custom_gather(self):
        self.text = self.source
        return True

    def custom_discard(self):
        self.text = None

    def custom_load(self):
        self.rows = self.text.splitlines()

    def custom_unload(self):
        self.rows = None

level = Level("##\n..")
loader = Loader()
loader.setup(1, 0)
loader.give_load_resource(level)
loader.start()
while not loader.done():
    loader.update()          # raises LoadingError if gathering failed
print(level.rows)            # ['##', '..']
```

## What this package does not do

There is no window, no drawing and no sound output. `Input` only records the
events it is given through `key_event`, `mouse_button_event`, `cursor_moved`,
`scrolled` and `resize`; something else has to deliver them. `TileGrid`,
`TileSheet` and `TextureParams` compute texture coordinates and settings but
upload nothing; `Font.render` hands each glyph's position and tile to a
callback rather than drawing it; `Wav` decodes sample data without playing it.
There is no command-line program.

## Running the tests

```
pytest
```