# quadkit

quadkit holds the game state for a small 2D game toolkit. It does not open
windows, read input or draw anything. Your own renderer and input handling
read the state these objects hold and feed them the player's input.

## What is inside

- `quadkit.geometry` provides the immutable `Vec2` (with `length`, `normalize`
  and `dot`), the `Rect` type with `overlaps` and `contains`, and
  `polar_to_cartesian`.
- `quadkit.platformer` is pixel-stepped platformer physics. A `World` contains
  tiled static layers of `Tile` values, movable `Solid`s and `Actor`s. It
  supports jump-through tiles and actors that are carried or squished by
  moving solids.
- `quadkit.curves` has piecewise-linear `Curve`s, which are sampled into
  `BatchedCurve`s. It also has `Color` and the three-stop `ColorCurve`.
- `quadkit.emitter_config` describes particle effects:
  - emission shapes: `PointShape`, `RectShape` and `SphereShape`;
  - particle meshes: `RectangleParticle`, `CircleParticle` and
    `CustomMeshParticle`;
  - `BlendMode`, sprite-sheet `AtlasConfig`, `ParticleMaterial` and
    `EmitterConfig`.
- Small game simulations:
  - `quadkit.life`: Conway's Life, with `CellState`, `next_state` and `LifeGrid`.
  - `quadkit.snake`: `SnakeGame`, plus the direction constants `UP`, `DOWN`,
    `LEFT` and `RIGHT`.
  - `quadkit.asteroids`: `AsteroidsGame`, `Ship`, `Bullet`, `Asteroid` and
    `wrap_around`.
  - `quadkit.arkanoid`: `ArkanoidGame`.
- `quadkit.angles` has `short_angle_dist`, `angle_lerp` and `wrap_rotation`,
  which work in degrees.

## Installation

```
pip install .
```

The package needs Python 3.10 or newer. It uses only the standard library.

## Platformer physics

```python
from quadkit.geometry import Vec2
from quadkit.platformer import Tile, World

world = World()
# A 4x2 layer of 8x8 tiles: an open top row over a solid floor, tag 1.
world.add_static_tiled_layer([Tile.EMPTY] * 4 + [Tile.SOLID] * 4, 8.0, 8.0, 4, 1)

player = world.add_actor(Vec2(0.0, 0.0), 8, 8)
moved = world.move_v(player, 5.0)   # False: the floor is directly below
on_ground = world.collide_check(player, world.actor_pos(player) + Vec2(0.0, 1.0))
```

`move_h` and `move_v` add the requested distance to a fractional remainder.
They then move the actor one whole pixel at a time. On the first blocked pixel
they stop and return `False`. Layers with tag 1 and collidable solids count as
obstacles.

`solid_move` moves a solid. Actors standing on top of the solid ride along
with it horizontally. Actors in its path are pushed, and an actor that cannot
be pushed any further is marked as squished. `world.squished(actor)` reports
that mark.

## Particle effect configuration

```python
from quadkit.curves import Color, ColorCurve, Curve
from quadkit.emitter_config import AtlasConfig, BlendMode, EmitterConfig, SphereShape

config = EmitterConfig(
    amount=30,
    lifetime=0.3,
    emission_shape=SphereShape(radius=5.0),
    blend_mode=BlendMode.ADDITIVE,
    atlas=AtlasConfig.from_range(4, 4, start=8),   # frames 8..16 of a 4x4 sheet
    size_curve=Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)]),
    colors_curve=ColorCurve(end=Color(1.0, 0.0, 0.0, 0.0)),
)

sizes = config.size_curve.batch()          # BatchedCurve
sizes.get(0.25)                            # size multiplier a quarter into a lifetime
config.colors_curve.at(0.75)               # Color three quarters into a lifetime
config.atlas.frame_uv(9)                   # (u, v, width, height) in the sheet
config.shape.mesh()                        # Mesh(vertices, indices) of one particle
```

## Games

Each game is a plain object. You advance it by time or by a fixed step, and
pass the input as booleans:

```python
from quadkit.snake import DOWN, SnakeGame

game = SnakeGame()
game.steer(DOWN)
game.tick()
print(game.head, game.score, game.game_over)
```

```python
from quadkit.arkanoid import ArkanoidGame
from quadkit.asteroids import AsteroidsGame
from quadkit.life import LifeGrid

arkanoid = ArkanoidGame()
arkanoid.step(1 / 60, space=True)          # launch the ball from the paddle

asteroids = AsteroidsGame(800.0, 600.0)
over = asteroids.step(0.016, forward=True, shoot=True)
nose, rear_left, rear_right = asteroids.ship_vertices()

life = LifeGrid.random(64, 48)
life.step()
```

## What the package does not do

- It has no rendering, windowing, audio or input handling.
- It describes particle effects but does not run them. The package has
  `EmitterConfig` and its parts, plus the curve and colour types, but it has
  nothing that spawns, moves or ages particles over time.
- It has no command-line program.

## Running the tests

```
pip install .[test]
pytest
```