# subsim

An underwater scene simulation. A submarine moves through a cylindrical
environment with a floor and a ceiling. Coral stands on the floor, the
water surface above moves in waves, and a school of boids swims inside
the environment. Each boid follows alignment, separation and cohesion
rules and turns away from the wall, the floor and the ceiling.

The package holds the scene's state and its per-frame update rules. It
uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

```
subsim [--resources DIR] [--steps N] [--seed SEED]
```

The command prints the controls list, loads the scene and advances it
`N` frames. Then it prints the submarine's final position.

- `--resources`: the directory that holds the `assets` folder. The
  default is `resources`. The submarine mesh is read from
  `assets/submarine/submarine-smooth.txt` and the coral meshes from
  `assets/coral/coral_1.txt` to `coral_14.txt`.
- `--steps`: how many frames to simulate. The default is `0`, and a
  negative value is rejected.
- `--seed`: a seed for the random start positions and headings of the
  flock.

If a mesh file is missing or malformed, the command prints an error to
standard error and exits with status 1.

## What it does not do

The package does not draw anything and opens no window. It loads no
textures and reads no keyboard or mouse input of its own. `Controls`
changes the scene state when you call its methods. Wire-frame, fog and
full-screen are kept as flags only, and `q` only sets `quit_requested`.
The `subsim` command runs a fixed number of frames without interaction.

## Controls

`Controls` maps input to state changes as follows:

| Input          | Effect                                                  |
|----------------|---------------------------------------------------------|
| `w` / `s`      | submarine direction z = +1 / -1                         |
| `a` / `d`      | submarine direction x = +1 / -1                         |
| Up / Down      | submarine direction y = +1 / -1 (`SpecialKey.UP`/`DOWN`) |
| mouse movement | changes the camera's `theta` and `phi`                  |
| `u`            | flips `wire_frame_on`                                   |
| `b`            | flips `fog_on` (on at start)                            |
| `f`            | flips `full_screen_on` and restores 1280x720 on leaving |
| `q`            | sets `quit_requested`                                   |

When any direction component is non-zero, the submarine moves at speed
0.025. When a movement key is released, that axis is zeroed if it still
points the way the key set it. When all three axes are zero, the speed
drops to 0. The camera's `phi` is clamped to just under ±90°.

`subsim.scene.controls_text()` returns the help text that the command
prints.

## Library overview

- `subsim.geometry`: `normalize` (raises `ValueError` for a zero vector),
  `is_zero`, `cross`, `triangle_normal`, `pitch_degree`, `yaw_degree`,
  `direction_from_angles`, `degree_to_radian`, `radian_to_degree`.
- `subsim.mesh`: `parse_mesh(lines)` and `load_mesh(path)` read text
  made of `v x y z`, `vn x y z` and `f a//n b//n c//n` lines into a
  `Mesh` of `Face`s. Other lines are ignored. A malformed record raises
  `ValueError`. `Mesh.triangles()` yields each face as three
  `(normal, vertex)` pairs and raises `IndexError` for a number that is
  out of range.
- `subsim.scene_object`: `SceneObject` holds a mesh, a position, a
  direction, a speed, a rotation, a scale and a material.
  `load_scene_object(path)` builds one from a mesh file.
  `advance()` moves the object by `direction * speed`.
- `subsim.water`: `WaterSurface(grid_size=100, size=100.0)` is a flat
  square grid centred on the origin. `update(elapsed_ms)` sets each
  height to `0.5 * sin(z + elapsed_ms / 1000)`. `strips()` yields one
  quad strip per grid row.
- `subsim.boid_physics`: the `Boid` type (`advance()` moves it at speed
  0.01), `distance`, `distance_to_wall`, `distance_to_floor`,
  `distance_to_ceiling`, `min_distance_to_environment`, and the target
  directions `environment_target_direction`,
  `alignment_target_direction` and `cohesion_target_direction`.
- `subsim.boid_behavior`: `Neighbor`, `find_neighbors(subject,
  population)` (the six nearest, skipping the closest entry, which is
  taken to be the subject itself), `environment_triggered`,
  `avoid_environment` and `steer_with_neighbors`.
- `subsim.boids`: `Flock(count=40, rng=None)`. `Flock.update()` steers
  and moves every boid using the previous frame's states, then saves
  the new states as the previous ones.
- `subsim.submarine`: `load_submarine(path)` gives the submarine its
  start position `(0, 2, -2)`, yellow diffuse and white specular
  colours, rotation 90, scale 0.004 and shine 150.
- `subsim.coral`: `coral_paths(directory)` lists `coral_1.txt` to
  `coral_14.txt`. `load_corals(directory)` loads them, places them at
  their fixed positions on the floor (y = -1) and sets their scale to 2.
- `subsim.camera`: `Camera.follow(target)` places the camera 1.5 units
  from the target at the spherical angles `theta` and `phi` and sets
  `look_at` to the target.
- `subsim.controls`: `Controls` and `SpecialKey`, described above.
- `subsim.scene`: `Scene` holds the submarine, corals, flock, water,
  camera and controls. `Scene.load(resources, rng)` builds a scene from
  mesh files. `Scene.step(elapsed_ms)` updates the water, moves the
  submarine, makes the camera follow it and updates the flock.
  `boid_model()` returns the six `(normal, triangle)` faces of the boid
  pyramid.

## Example

```python
from subsim.mesh import parse_mesh

mesh = parse_mesh([
    "v 0 0 0",
    "v 1 0 0",
    "v 0 1 0",
    "vn 0 0 1",
    "f 1//1 2//1 3//1",
])
for triangle in mesh.triangles():
    print(triangle)
```

```python
import random
from subsim.boids import Flock

flock = Flock(rng=random.Random(1))
for _ in range(100):
    flock.update()
print(flock.current[0].position)
```