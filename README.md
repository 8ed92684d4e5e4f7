# raytracer

A small ray tracing framework. It provides RGB colours, 3D vectors and rays,
two shapes (axis-aligned boxes and spheres) with surface area and volume,
ray–sphere intersection, and a renderer that writes a checkerboard test
image as a plain-text PPM (`P3`) file.

## Installation

```
pip install .
```

## Command line

```
raytracer
```

This renders an 800×600 checkerboard test image and saves it as
`./checkerboard.ppm`. The size and the output file can be changed:

```
raytracer --width 320 --height 240 --output board.ppm
```

## Library use

Modules:

- `raytracer.color`: `Color`, a frozen RGB value supporting `+` and `-`.
- `raytracer.geometry`: `Vec3` (with `+`, `-`, scalar `*`, `dot`, `length`,
  `normalized`), `Ray`, `HitPoint` and `intersect_ray_sphere`, which returns
  the distance along a normalized ray to a sphere, or `None` on a miss.
- `raytracer.pixel`: `Pixel`, integer coordinates plus a colour.
- `raytracer.ppm`: `PpmWriter`, which collects pixels and saves a P3 file.
- `raytracer.shapes`: the abstract `Shape`, and `Box` and `Sphere`.
- `raytracer.renderer`: `Renderer` and the command's `main`.

```python
from raytracer.color import Color
from raytracer.geometry import Ray, Vec3
from raytracer.shapes import Box, Sphere

sphere = Sphere(Vec3(0.0, 0.0, 5.0), 1.0, "ball", Color(1.0, 0.0, 0.0))
print(sphere.area(), sphere.volume())

hit = sphere.intersect(Ray(Vec3(0.0, 0.0, 0.0), Vec3(0.0, 0.0, 1.0)))
if hit.is_intersecting:
    print(hit.distance, hit.hit_point)  # 4.0, Vec3(x=0.0, y=0.0, z=4.0)

box = Box(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 2.0, 3.0), "crate", Color(0.5, 0.5, 0.5))
print(box)
```

`Box` and `Sphere` take their arguments in the order geometry, name, colour;
all of them have defaults (a unit box from the origin, a unit sphere at the
origin, the name `"shape"` and white). Area and volume are always
non-negative, whatever the order of the box corners or the sign of the radius.

### Writing an image

```python
from raytracer.color import Color
from raytracer.pixel import Pixel
from raytracer.ppm import PpmWriter

writer = PpmWriter(2, 2, "tiny.ppm")
writer.write(Pixel(0, 0, Color(1.0, 1.0, 1.0)))
writer.save()             # writes tiny.ppm
writer.save("other.ppm")  # writes to, and remembers, a new name
```

Channels are scaled to 0–255 and clamped. Rows are flipped so that `y = 0`
is the bottom line of the image. A pixel outside the image raises
`IndexError`.

### Renderer

`Renderer(width, height, filename)` draws the checkerboard with `render()`,
keeps every pixel's colour in the `color_buffer` property (row-major order)
and saves the PPM file when `render()` finishes. `write(pixel)` stores a
single pixel and raises `IndexError` for one outside the image.

## What it does not do

The package does not open a window or display the image on screen; its only
output is the PPM file. The renderer draws a fixed checkerboard pattern and
does not trace shapes into the image.

## Tests

```
pip install .[test]
pytest
```