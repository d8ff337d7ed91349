# mobakit

A small, dependency-free toolkit of building blocks for 2D games. Screen
coordinates are used throughout: y grows downwards, so "up" is negative y.

## Modules

- `mobakit.mathlib`
  - `normalize(value, start, end)` wraps a number cyclically into `[start, end)`.
  - `random_range(start, end)` returns a random value between the bounds. Two integer bounds give an integer with both ends included. Other bounds give a uniform float. Equal bounds return `start`.
- `mobakit.vector`
  - `Vector2` is a mutable 2D vector.
    - Direction constructors: `up()`, `down()`, `left()`, `right()`, `zero()` and `identity()`.
    - Arithmetic operators, and indexing with `[0]` and `[1]`. Any other index raises `IndexError`.
    - Equality tolerates a squared difference below `1e-6`, so vectors are not hashable.
    - `rotate(by)` takes degrees, or another vector whose angle is used.
    - `angle_degree()` and `angle_radian()` measure clockwise from up.
    - `random`, `from_radian`, `from_degree`, `sqr_magnitude`, `magnitude` and `normalized`. A zero vector stays zero under `normalized`.
    - The static methods `distance` and `squared_distance`.
  - `Vector3` is a plain dataclass with `x`, `y` and `z`.
- `mobakit.point`
  - `Point2D` is an immutable integer grid point. It supports `+` and `-`.
  - The constants `Point2D.UP`, `DOWN`, `LEFT` and `RIGHT`, and neighbour methods of the same names in lower case.
  - It prints as `{x, y}`.
- `mobakit.polygon`
  - `Transform` holds `position`, `scale` and `rotation`. `rotation` is the direction that points up.
  - `Polygon` is a closed outline. `drawable_points(transform)` returns the points scaled, rotated and moved into world space. `draw(renderer, transform, color)` draws the outline with an opaque version of the color. The static method `draw_line(renderer, v1, v2, color)` draws a single line.
  - `Circle(sample)`, `Square()` and `Hexagon()` are ready-made unit shapes.
  - `Renderer` records the calls made to it. `set_draw_color(r, g, b, a)` sets the current color. `draw_line(x1, y1, x2, y2)` appends `((x1, y1), (x2, y2), color)` to `renderer.lines`. Any object with these two methods can be drawn on.
- `mobakit.color`
  - `Color32` is an immutable colour of 8-bit RGBA.
    - `from_packed` and `packed()` use the `0xAABBGGRR` layout.
    - `from_colorf` converts from a `Colorf`.
    - Indexing runs in the order alpha, red, green, blue.
    - `random_color`, `lerp`, `light()` and `dark()` are also provided.
  - `Colorf` holds float RGBA.
    - `from_packed` and `from_color32` build one from the other forms.
    - `hsv_to_rgb(h, s, v, hdr=True)` builds a colour from HSV. Without `hdr` the components are clamped to `[0, 1]`. A hue outside the supported sectors raises `ValueError`.
    - `rgb_to_hsv()` returns `(hue, saturation, value)`.
  - `NAMED_COLORS` maps names such as `"CornflowerBlue"` to `Color32` values.
- `mobakit.perlin`
  - `PerlinNoise` gives 1D, 2D and 3D Perlin noise. It uses the classic reference table, or one shuffled by a seed or by a callable that returns 32-bit integers.
  - The `_01` variants remap the result to `[0, 1]`.
  - Octave noise comes as `octave*d`. The `_11` variants clamp it and the `_01` variants clamp and remap it. `normalized_octave*d` divides it by the maximum amplitude.
  - `serialize()` and `deserialize(state)` save and restore the permutation table.
  - `MT19937` is the built-in Mersenne Twister, so a seed gives the same noise on every platform.
- `mobakit.hide_flags`
  - `HideFlags` is an `IntFlag` of visibility and persistence flags.

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
from mobakit.vector import Vector2
from mobakit.polygon import Renderer, Square, Transform
from mobakit.color import NAMED_COLORS
from mobakit.perlin import PerlinNoise

v = Vector2.up().rotate(90.0)          # points right

square = Square()
transform = Transform(position=Vector2(100, 100),
                      scale=Vector2(10, 10),
                      rotation=Vector2.up())
renderer = Renderer()
square.draw(renderer, transform, NAMED_COLORS["Red"])
print(renderer.lines)                  # four line segments

noise = PerlinNoise(seed=42)
height = noise.normalized_octave2d_01(0.3, 0.7, 4, 0.5)
```

`Transform()` defaults to a zero rotation vector, whose angle is 180 degrees.
Pass `rotation=Vector2.up()` to get no rotation at all.

## What it does not do

The package does not open a window, run a game loop or read keyboard input.
`Renderer` only records line commands. To see shapes on screen, pass your own
object with `set_draw_color` and `draw_line` methods that draw onto a real
surface. The package has no command-line program.