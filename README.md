# manikinkit

Building blocks for animating simple articulated figures and for working
with raster images held in memory.

## Installation

```
pip install manikinkit
```

## What is inside

- `manikinkit.geometry`: `Rectangle` (corner plus a size that may be
  negative, with `x1`, `y1`, `x2`, `y2` properties), `Circle` (integer centre,
  radius and a `diameter` property), and the plain points `Point2D`,
  `Point3D`, `Point4D`.
- `manikinkit.color`: `ColorRGBA` with `as_tuple()`, and the constant
  `CORNFLOWER_BLUE`.
- `manikinkit.fileio`: `read_file(path)` returns the whole content of a text
  file; a missing file raises `FileNotFoundError`.
- `manikinkit.image`: `Image`, a width × height image with any number of
  byte channels per pixel. It offers `pixel_at`, `set_pixel_at`, `set_image`,
  `copy`, `flip_horizontal`, `flip_vertical` and `negative`. Pixel access
  outside the image raises `IndexError`. `Image.from_file(path)` loads any
  format Pillow can read and converts it to four RGBA channels.
- `manikinkit.imageutil`: in-place effects on a circular area
  (`black_hole_effect`, `expand_effect`, `swirl_effect`). It also has
  `copy_from_image` and `paste_to_image` for regions, `grayscale_image` with
  `GrayscaleType` (min, median, max, lightness, average, luminosity),
  `separate_channel` and `subtract_channel` with `Channel` and
  `SeparationType`, and the sampling helpers `lerp_pixels` and
  `bilerp_pixels`. The grayscale and channel functions return new images.
- `manikinkit.input`: `InputManager` records the up/down `KeyState` of 256
  keys, 256 special keys and three mouse buttons, plus the mouse location.
  You feed it events with `press_key`, `release_key`, `press_special`,
  `release_special`, `set_mouse_button` and `move_mouse`.
- `manikinkit.light`: `LightSource` (homogeneous position, colour,
  `LightSourceType`).
- `manikinkit.keyframe`: `Keyframe`, a position, scale and rotation snapshot.
  Each of the three is a 3-tuple of floats.
- `manikinkit.animation_track`: `AnimationTrack` holds one slot per frame and
  interpolates linearly between keyframes. On every `update` it writes
  `position`, `rotation` and `scale` onto its target object, if it has one,
  and returns the pose.
- `manikinkit.animation`: `Animation` plays a set of named tracks at a frame
  rate. It can loop, and it has `play`, `pause`, `stop` and `update`.
- `manikinkit.cube`: `cube_vertices` (one colour per face) and
  `solid_cube_vertices` return the 36 `CubeVertex` entries of a unit cube,
  laid out as a triangle list.

## Examples

```python
from manikinkit.image import Image
from manikinkit.imageutil import grayscale_image, GrayscaleType

img = Image.from_file("photo.png")
gray = grayscale_image(img, GrayscaleType.LUMINOSITY)
gray.flip_vertical()
```

```python
from types import SimpleNamespace

from manikinkit.animation import Animation
from manikinkit.animation_track import AnimationTrack
from manikinkit.keyframe import Keyframe

figure = SimpleNamespace()
track = AnimationTrack(figure, 30)
track.add_keyframe(15, Keyframe(position=(0.0, 1.0, 0.0)))

anim = Animation(frame_count=30, frame_rate=30.0, looping=True)
anim.add_track("body", track)
anim.play()
anim.update(0.5)          # frame 15
print(figure.position)    # (0.0, 1.0, 0.0)
```

## What it does not do

The package draws nothing. It opens no window, has no renderer or shaders,
and saves no images. It has no command-line program. `InputManager` only
stores the state you report to it and does not read any device. The cube
module and the animation classes give you vertex data and poses, and you
pass these to whatever draws them.

## Running the tests

```
pip install manikinkit[test]
pytest
```