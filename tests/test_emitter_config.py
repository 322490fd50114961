import dataclasses
import math
import random

import pytest

from quadkit.curves import ColorCurve, WHITE
from quadkit.emitter_config import (
    AtlasConfig,
    BlendMode,
    CircleParticle,
    CustomMeshParticle,
    EmitterConfig,
    ParticleMaterial,
    PointShape,
    RectangleParticle,
    RectShape,
    SphereShape,
)
from quadkit.geometry import Vec2


def test_point_shape_always_origin():
    rng = random.Random(1)
    assert all(PointShape().gen_random_point(rng) == Vec2(0.0, 0.0) for _ in range(10))


def test_rect_shape_within_bounds():
    rng = random.Random(2)
    shape = RectShape(width=10.0, height=4.0)
    for _ in range(200):
        p = shape.gen_random_point(rng)
        assert -5.0 <= p.x <= 5.0
        assert -2.0 <= p.y <= 2.0


def test_sphere_shape_within_radius():
    rng = random.Random(3)
    shape = SphereShape(radius=3.0)
    for _ in range(200):
        assert shape.gen_random_point(rng).length() <= 3.0 + 1e-9


def test_shapes_deterministic_with_seed():
    shape = SphereShape(radius=2.0)
    a = [shape.gen_random_point(random.Random(7)) for _ in range(3)]
    b = [shape.gen_random_point(random.Random(7)) for _ in range(3)]
    assert a == b


def test_rectangle_mesh_indices_and_aspect():
    mesh = RectangleParticle(aspect_ratio=2.0).mesh()
    assert mesh.indices == (0, 1, 2, 0, 2, 3)
    assert len(mesh.vertices) == 4 * 9
    xs = mesh.vertices[0::9]
    assert xs == (-2.0, 2.0, 2.0, -2.0)


def test_circle_mesh_structure():
    subdivisions = 6
    mesh = CircleParticle(subdivisions).mesh()
    assert len(mesh.vertices) == 9 * (subdivisions + 2)
    assert len(mesh.indices) == 3 * subdivisions
    assert mesh.indices[:3] == (0, 1, 2)
    assert max(mesh.indices) == subdivisions + 1
    for i in range(1, subdivisions + 2):
        rx, ry = mesh.vertices[i * 9], mesh.vertices[i * 9 + 1]
        assert math.isclose(math.hypot(rx, ry), 1.0)


def test_circle_mesh_rejects_zero_subdivisions():
    with pytest.raises(ValueError):
        CircleParticle(0).mesh()


def test_custom_mesh_round_trip():
    vertices = [0.0] * 27
    indices = [0, 1, 2]
    mesh = CustomMeshParticle(vertices, indices).mesh()
    assert mesh.vertices == tuple(vertices)
    assert mesh.indices == tuple(indices)


def test_custom_mesh_rejects_partial_vertex():
    with pytest.raises(ValueError):
        CustomMeshParticle([0.0] * 10, [0])


def test_atlas_open_end_covers_sheet():
    atlas = AtlasConfig.from_range(4, 4, 8)
    assert (atlas.start_index, atlas.end_index) == (8, 16)


def test_atlas_exclusive_end():
    atlas = AtlasConfig.from_range(4, 4, 0, 8)
    assert (atlas.start_index, atlas.end_index) == (0, 8)


def test_atlas_inclusive_end_and_errors():
    atlas = AtlasConfig.from_range(4, 4, 0, 8, end_inclusive=True)
    assert atlas.end_index == 7
    with pytest.raises(ValueError):
        AtlasConfig.from_range(4, 4, 0, 0, end_inclusive=True)
    with pytest.raises(ValueError):
        AtlasConfig.from_range(0, 4)


def test_atlas_frame_uv():
    atlas = AtlasConfig.from_range(4, 4)
    assert atlas.frame_uv(0) == (0.0, 0.0, 0.25, 0.25)
    assert atlas.frame_uv(5) == (0.25, 0.25, 0.25, 0.25)


def test_emitter_config_defaults():
    config = EmitterConfig()
    assert config.amount == 8
    assert config.lifetime == 1.0
    assert config.initial_velocity == 50.0
    assert config.size == 10.0
    assert config.emitting is True
    assert config.initial_direction == Vec2(0.0, -1.0)
    assert config.shape == RectangleParticle(1.0)
    assert config.emission_shape == PointShape()
    assert config.blend_mode is BlendMode.ALPHA
    assert config.colors_curve == ColorCurve(WHITE, WHITE, WHITE)
    assert config.atlas is None and config.size_curve is None


def test_emitter_config_replace_keeps_other_fields():
    base = EmitterConfig(lifetime=0.4, amount=10, blend_mode=BlendMode.ADDITIVE)
    copy = dataclasses.replace(base, emitting=False)
    assert copy.emitting is False
    assert (copy.lifetime, copy.amount, copy.blend_mode) == (0.4, 10, BlendMode.ADDITIVE)
    assert base.emitting is True


def test_particle_material_holds_sources():
    material = ParticleMaterial(vertex="v", fragment="f")
    assert (material.vertex, material.fragment) == ("v", "f")