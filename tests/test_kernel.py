import numpy as np
import pytest
import trimesh

from polychannel.builder import build
from polychannel.config import BuildConfig
from polychannel.geom import vclose
from polychannel.kernel import RigidTransform, TrimeshKernel
from polychannel.placement import PlacementSequence, Placement, Rotation, ShapeKind


def _bounds_close(mesh, expected, atol=1e-9):
    return np.allclose(mesh.bounds, expected, atol=atol)


class TestRigidTransform:

    def test_identity(self):
        assert np.allclose(RigidTransform().as_array(), np.eye(4))

    def test_rotate_then_translate(self):
        xf = RigidTransform((5, 0, 0), Rotation(90, (0, 0, 1)))
        assert vclose(xf.matrix().mul((1, 0, 0)), (5, 1, 0))

    def test_from_placement(self):
        p = Placement("cube", (1, 1, 1), (1, 2, 3), (30, (1, 0, 0)))
        xf = RigidTransform.from_placement(p)
        assert xf.translation == (1, 2, 3)
        assert xf.rotation == p.rotation


class TestTrimeshKernel:

    def test_centered_cube(self):
        mesh = TrimeshKernel().make_primitive(ShapeKind.CUBE, (2, 4, 6), RigidTransform())
        assert _bounds_close(mesh, [[-1, -2, -3], [1, 2, 3]])

    def test_uncentered_cube(self):
        mesh = TrimeshKernel().make_primitive("cube", (2, 4, 6), RigidTransform(), centered=False)
        assert _bounds_close(mesh, [[0, 0, 0], [2, 4, 6]])

    def test_translated_and_rotated_cube(self):
        xf = RigidTransform((5, 0, 0), Rotation(90, (0, 0, 1)))
        mesh = TrimeshKernel().make_primitive("cube", (2, 1, 1), xf)
        assert _bounds_close(mesh, [[4.5, -1, -0.5], [5.5, 1, 0.5]])

    def test_sphere_is_scaled_unit_diameter(self):
        mesh = TrimeshKernel().make_primitive("sphr", (1, 2, 3), RigidTransform((0, 0, 10)),
                                              centered=False)
        assert _bounds_close(mesh, [[-0.5, -1, 8.5], [0.5, 1, 11.5]], atol=1e-6)

    def test_sphere_resolution_follows_config(self):
        coarse = TrimeshKernel(BuildConfig(sphere_subdivisions=1))
        fine = TrimeshKernel(BuildConfig(sphere_subdivisions=3))
        a = coarse.make_primitive("sphr", (1, 1, 1), RigidTransform())
        b = fine.make_primitive("sphr", (1, 1, 1), RigidTransform())
        assert len(b.vertices) > len(a.vertices)

    def test_hull_of_two_cubes(self):
        kernel = TrimeshKernel()
        a = kernel.make_primitive("cube", (1, 1, 1), RigidTransform())
        b = kernel.make_primitive("cube", (1, 1, 1), RigidTransform((3, 0, 0)))
        hull = kernel.hull(a, b)
        assert _bounds_close(hull, [[-0.5, -0.5, -0.5], [3.5, 0.5, 0.5]])
        assert hull.volume == pytest.approx(4.0)
        assert hull.is_watertight

    def test_compose_colors_copies(self):
        kernel = TrimeshKernel()
        a = kernel.make_primitive("cube", (1, 1, 1), RigidTransform())
        scene = kernel.compose([a, a], color=(1.0, 0.0, 0.0))
        assert isinstance(scene, trimesh.Scene)
        assert len(scene.geometry) == 2
        for mesh in scene.geometry.values():
            assert mesh.visual.face_colors[0].tolist() == [255, 0, 0, 255]


def test_build_with_trimesh():
    seq = PlacementSequence.relative([
        ("sphr", (1, 1, 1), (0, 0, 0)),
        ("cube", (1, 1, 1), (4, 0, 0)),
        ("cube", (1, 1, 1), (0, 4, 0)),
    ])
    scene = build(seq)
    assert len(scene.geometry) == 2
    assert _bounds_close(scene, [[-0.5, -0.5, -0.5], [4.5, 4.5, 0.5]], atol=1e-6)

    shapes = build(seq, shapes_only=True)
    assert len(shapes.geometry) == 3
