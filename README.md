# minirt

A small ray tracer that reads scene descriptions from `.rt` files and renders
them to binary PPM images. Shading combines ambient light, one point light
with diffuse and specular terms, and hard shadows. Supported shapes are
spheres, planes and capped cylinders.

## Installation

```
pip install .
```

## Usage

```
minirt scene.rt
minirt scene.rt -o picture.ppm --size 640x360
```

- `scene` – the scene file; its name must end in `.rt`.
- `-o`, `--output` – where to write the image (default: the scene path with
  a `.ppm` suffix).
- `--size WIDTHxHEIGHT` – image size; without it the image is 1920x1080.
  Rendering is done in pure Python, so a smaller size renders much faster.

On success the render time is printed. A bad command line, an invalid scene
file or a file that cannot be written is reported on standard error and the
command exits with status 1.

## Scene format

Each non-empty line starts with an identifier followed by whitespace-separated
fields. Vectors and colours are written as three comma-separated numbers.

| Id   | Fields                                                                 |
|------|------------------------------------------------------------------------|
| `A`  | ratio `[0,1]`, colour `R,G,B`                                          |
| `C`  | position, orientation (each component in `[-1,1]`, not all zero), FOV `[0,180]` degrees |
| `L`  | position, brightness `[0,1]`, optional colour                          |
| `sp` | centre, diameter (> 0), colour                                         |
| `pl` | point, normal (each component in `[-1,1]`, not all zero), colour       |
| `cy` | base point, axis (each component in `[-1,1]`, not all zero), diameter (> 0), height (> 0), colour |

Colour components must lie in `[0,255]`. A second `A`, `C` or `L` line is an
error, as is an unknown identifier or extra text at the end of a line. A scene
needs an `L` line to be rendered.

Example:

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,0 4 255,0,0
pl 0,-2,0 0,1,0 200,200,200
cy 3,-2,2 0,1,0 2 4 0,128,255
```

## Library use

```python
from minirt.parser import load_scene
from minirt.renderer import render

scene = load_scene("scene.rt")
image = render(scene)
print(image.pixel(0, 0))
image.save_ppm("out.ppm")
```

`minirt.parser.parse_scene` builds a scene from any iterable of lines.
Invalid input raises `minirt.errors.SceneError`, whose `message` holds the
full error text.

`minirt.controls.handle_key(scene, key, action)` applies the camera, light
and object controls (move, rotate, cycle the selection, switch between
camera, light and object editing) to a scene and returns whether the frame
needs rendering again; Escape raises `QuitRequested`.
`minirt.controls.resize(scene, width, height)` changes the output size and
returns a freshly rendered `Image`.

## What it does not do

There is no window and no interactive viewer: the command renders one image
to a file and exits. The key controls are available only as library
functions for a program that supplies its own key events.

## Tests

```
pip install .[test]
pytest
```