# rtengine

A physically based path tracer written in pure Python. Scenes are built from
spheres (stationary or moving, for motion blur), parallelograms, boxes,
objects rotated about the y axis or translated, and constant-density media
such as fog. Materials can be Lambertian, metal, glass, emissive or isotropic.
Textures can be solid colours, 3D checkers or Perlin-noise marble.

The renderer uses importance sampling toward light sources, stratified pixel
sampling, depth of field and an optional bounding volume hierarchy.

There are two cameras:

- **static** (`rtengine.static_camera.StaticCamera`) renders the image once.
  It writes a plain-text PPM image (`P3`) to `output/<file name>` and creates
  the directory if needed. Progress is shown on standard error.
- **dynamic** (`rtengine.dynamic_camera.DynamicCamera`) opens a pygame
  window. It adds one stratified sample per pixel each frame until the
  samples per pixel are used up. W/A/S/D move the camera, and moving
  restarts sampling. `=` and `-` raise and lower the samples per pixel, never
  below 1. Esc or closing the window quits. A frame-rate overlay is drawn if
  one of a few common system fonts can be loaded. Tiles grow when the frame
  rate is above 30 fps and shrink when it is below 15 fps.

## Installation

```
pip install .
```

This installs `pygame`, which the dynamic camera uses. To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
raytracer [options]
```

| Option | Meaning | Default |
| --- | --- | --- |
| `-h`, `--help` | Show help | |
| `--camera static\|dynamic` | Camera type | `static` |
| `--output <file>` | Output file name for the static camera, written under `output/` | `image.ppm` |
| `-p`, `--parallel` | Render with a pool of worker threads | off |
| `-b`, `--bvh` | Use a bounding volume hierarchy | off |
| `-g`, `--gpu` | Accepted, but rendering always runs on the CPU | off |
| `--width <int>` | Image width in pixels | `600` |
| `--samples <int>` | Samples per pixel | `100` |
| `--depth <int>` | Maximum number of light bounces | `50` |

The command always renders the Cornell box scene. An unknown option or a bad
value is reported on standard error, and then nothing is rendered. Choosing
`--output` together with the dynamic camera prints a warning, and the output
file name is not used.

Each pixel uses the largest square number of stratified samples that does not
exceed `--samples`. For example, `--samples 10` traces 9 rays per pixel.

Examples:

```
raytracer --camera static --output render.ppm --parallel --bvh
raytracer --camera dynamic --parallel
```

## Library use

```python
from rtengine.config import CameraConfig
from rtengine.scenes import cornell_box_scene
from rtengine.static_camera import StaticCamera

config = CameraConfig(image_width=200, samples_per_pixel=16, max_depth=10)
scene = cornell_box_scene(config)
camera = StaticCamera(scene.config, "cornell.ppm", output_dir="output")
path = camera.render(scene.world, scene.lights)
```

`rtengine.scenes` also provides `bouncing_spheres_scene()`. Each scene
function returns a `Scene` holding `world`, `lights` and `config`. It keeps
the image size and sampling settings of the config you pass and sets the
camera placement.

You can also build scenes by hand from these objects:

- `rtengine.sphere.Sphere`
- `rtengine.plane.Plane` and `rtengine.plane.make_box`
- `rtengine.transforms.RotateY` and `rtengine.transforms.Translate`
- `rtengine.medium.ConstantMedium`

Add them to a `rtengine.hittable.HittableList`, or wrap them in a
`rtengine.bvh.BVHNode`. Materials are in `rtengine.materials`, textures in
`rtengine.textures` and sampling distributions in `rtengine.pdf`.

## Limitations

- Rendering runs on the CPU only. The `--gpu` option and `use_gpu` setting
  have no effect.
- The command line has no option to choose a scene or load one from a file.
  Scenes other than the Cornell box must be built in Python.
- Output is plain PPM text. No other image formats are written.
- Parallel rendering uses Python threads.