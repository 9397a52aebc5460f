# unison2d

Small, dependency-free building blocks for 2D games:

- **Math types**: `Vec2`, `Color` and `Rect`, immutable dataclasses with the usual
  operators and conversions.
- **Input**: `InputState` tracks keyboard, mouse and touch state frame by frame;
  `ActionMap` maps raw inputs to your own game actions.
- **Assets**: `compress_assets` / `embed_assets` gzip a directory of files ahead of
  time, and `AssetStore` decompresses them and serves them by relative path.
- **Physics kernels**: 2×2 matrix helpers in `unison2d.mat2` and batch gravity
  integration, velocity derivation and distance-constraint solving in
  `unison2d.compute.ScalarBackend`.
- **2D lighting geometry**: occluders, point and directional light descriptions,
  shadow-quad projection with distance fade, boundary-edge extraction and a radial
  gradient texture for point-light sprites.

Python 3.10 or newer is required. The package has no runtime dependencies.

## Math types

```python
from unison2d.vec2 import Vec2
from unison2d.rect import Rect
from unison2d.color import Color

a = Vec2(3.0, 4.0)
a.length()                      # 5.0
a.normalized()                  # Vec2(x=0.6, y=0.8)
Vec2(0.0, 0.0).lerp(Vec2(10.0, 20.0), 0.5)   # Vec2(x=5.0, y=10.0)
2.0 * a, a / 2.0, -a
x, y = a                        # vectors unpack

box = Rect.from_center(Vec2(5.0, 5.0), Vec2(10.0, 6.0))
box.width(), box.height()       # (10.0, 6.0)
box.contains(Vec2(5.0, 5.0))    # True (edges count as inside)
Rect.from_bounds((-5.0, -3.0, 5.0, 3.0))

Color.from_hex(0xFF0000)        # opaque red; 0xRRGGBBAA is read when above 0xFFFFFF
Color.from_sequence([1.0, 0.5, 0.0])   # three components give an opaque color
Color.rgb(1.0, 0.5, 0.0).to_rgb_tuple()
```

`Vec2`, `Color` and `Rect` define named constants such as `Vec2.ZERO`, `Vec2.UP`,
`Color.WHITE` and `Color.TRANSPARENT`. `Color()` is white. `Vec2.clamp` raises
`ValueError` when a lower bound exceeds an upper bound, and `Color.from_rgba8` /
`Color.from_hex` raise `ValueError` for out-of-range values.

## Input

Feed platform events into an `InputState`, call `begin_frame()` at the start of each
frame, and let an `ActionMap` turn the raw state into game actions:

```python
from unison2d.input_state import InputState
from unison2d.input_types import KeyCode, MouseButton
from unison2d.actions import ActionMap
from unison2d.rect import Rect
from unison2d.vec2 import Vec2

state = InputState()
actions = ActionMap()

# Actions can be any hashable value.
actions.bind_key(KeyCode.ARROW_LEFT, "left")
actions.bind_key(KeyCode.ARROW_RIGHT, "right")
actions.bind_mouse_button(MouseButton.LEFT, "shoot")
actions.bind_touch_region(Rect.from_center(Vec2(700.0, 500.0), Vec2(100.0, 100.0)), "jump")

state.touch_started(1, 700.0, 500.0)
state.key_pressed(KeyCode.ARROW_LEFT)
actions.update(state)
actions.is_action_active("jump")        # True
actions.is_action_just_started("jump")  # True
actions.axis_value("left", "right")     # -1.0

state.begin_frame()
```

`begin_frame()` clears the "just pressed" and "just released" flags, removes touches
that ended or were cancelled, and marks the remaining touches as stationary.
`copy_held_from(other)` takes over another state's held keys and mouse buttons.

## Assets

```python
from unison2d.embed import compress_assets, embed_assets
from unison2d.assets import AssetStore

store = AssetStore()
store.load_embedded(compress_assets("project/assets"))
png = store.get("textures/player.png")  # bytes, or None if missing
"textures/player.png" in store          # True
len(store)
sorted(store.paths())
```

`compress_assets(asset_dir)` returns `(relative_path, gzip_bytes)` pairs sorted by
path, with `/` as separator. `embed_assets(asset_dir, out_dir)` writes each compressed
file to `out_dir/_assets_compressed/<name>.gz` (separators in the name become `__`)
and an index, `out_dir/assets.json`, mapping asset paths to those files; it returns
the index path. A missing asset directory raises `FileNotFoundError`. Data that is not
valid gzip makes `load_embedded` raise `unison2d.assets.AssetError`.

## Physics kernels

```python
from unison2d.mat2 import mat2_inv, mat2_mul
from unison2d.compute import ScalarBackend

m = (3.0, 1.0, 2.0, 4.0)                 # column-major 2x2
mat2_mul(m, mat2_inv(m))                 # identity (up to rounding)

pos = [0.0, 10.0, 5.0, 10.0]             # flat [x0, y0, x1, y1]
vel = [1.0, 0.0, -1.0, 0.0]
prev = [0.0] * 4
ScalarBackend.integrate_gravity(pos, vel, prev, -10.0, 0.1, [1.0, 1.0])
ScalarBackend.derive_velocities(pos, prev, vel, 0.1)
ScalarBackend.solve_distance_constraints_batch(pos, [(0, 1, 5.0)], [1.0, 1.0], 0.0)
```

The kernels update the lists in place; vertices with an inverse mass of 0 are fixed.
`mat2_inv` and `mat2_inv_transpose` return the identity for a (near) singular matrix.
`ComputeBackend` and `GpuComputeBackend` are abstract interfaces for other backends.

## Lighting geometry

```python
from unison2d.occluder import Occluder
from unison2d.shadow import project_point_shadows, project_directional_shadows, compute_boundary_edges
from unison2d.gradient import generate_radial_gradient

boxes = [Occluder.from_aabb(0.0, 0.0, 1.0, 1.0), Occluder.from_ground(-2.0, -10.0, 10.0)]
quads = project_point_shadows((0.0, 5.0), 10.0, boxes, 0.0, 1.0)
faded = project_directional_shadows((0.0, -1.0), 20.0, boxes, 4.0, 1.0)

edges = compute_boundary_edges([0, 1, 2, 0, 2, 3])
outline = Occluder.from_boundary_edges([0.0, 0.0, 1.0, 0.0, 1.0, 1.0, 0.0, 1.0], edges)
texture = generate_radial_gradient(64)   # 64*64*4 bytes of RGBA
```

Each `ShadowQuad` carries four world-space vertices, two triangles and per-vertex
RGBA colours. With a positive shadow distance the shadow stops at that distance and,
for a positive attenuation, is split into eight strips whose alpha fades as
`(1 - t) ** attenuation`. `PointLight`, `DirectionalLight`, `LightId` and
`ShadowSettings` (see `ShadowSettings.hard()` and `ShadowSettings.soft()`) in
`unison2d.lights` describe lights; `ShadowFilter` in `unison2d.occluder` gives the
filter's shader value through `as_uniform_value()`.

## What this package does not do

There is no renderer, window or platform event loop: nothing here draws, and input
events must be fed into `InputState` by your own code. The lighting modules compute
geometry and hold light settings, but there is no system that manages lights or
renders a lightmap. The physics modules are kernels and matrix helpers only; there is
no physics world, soft-body or rigid-body simulation.

## Running the tests

```
pip install -e ".[test]"
pytest
```