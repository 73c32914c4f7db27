"""Tests for the plane classifier."""

import math

import pytest

from shellframer.core.classifier import PlaneClassifier, distinct_values, edges_axis_aligned
from shellframer.models import (
    Axis, ErrorKind, FaceEntity, NotAPrismError, Point3D, Side, Transform,
)


def _shift_face(face: FaceEntity, transform: Transform) -> FaceEntity:
    return FaceEntity(
        normal=transform.apply_vector(face.normal),
        loops=[[transform.apply_point(p) for p in loop] for loop in face.loops],
    )


def _x_max_index(faces):
    return next(i for i, f in enumerate(faces) if f.normal.x > 0.5)


class TestUnitCube:
    def test_six_planes_two_per_axis(self, make_box):
        result = PlaneClassifier().classify(make_box())

        assert result.ok
        planes = result.unwrap()
        for axis in Axis:
            pair = planes.pair(axis)
            assert pair.min.offset == pytest.approx(0.0)
            assert pair.max.offset == pytest.approx(1.0)

    def test_each_plane_is_unit_rectangle(self, make_box):
        planes = PlaneClassifier().classify(make_box()).unwrap()

        for axis in Axis:
            for side in Side:
                plane = planes.pair(axis).get(side)
                assert len(plane.outer_loop) == 4
                assert plane.inner_loops == ()
                for in_plane in axis.in_plane:
                    assert plane.bounds[in_plane] == pytest.approx((0.0, 1.0))

    def test_normals_point_outward(self, make_box):
        planes = PlaneClassifier().classify(make_box()).unwrap()

        assert planes.x.min.normal.x == pytest.approx(-1.0)
        assert planes.x.max.normal.x == pytest.approx(1.0)
        assert planes.z.max.normal.z == pytest.approx(1.0)

    def test_tolerance_scales_with_diagonal(self, make_box):
        small = PlaneClassifier().classify(make_box()).unwrap()
        large = PlaneClassifier().classify(
            make_box(x=(0.0, 4000.0), y=(0.0, 3000.0), z=(0.0, 2400.0))
        ).unwrap()

        assert small.tolerance == pytest.approx(math.sqrt(3) * 1e-6)
        assert large.tolerance == pytest.approx(math.sqrt(4000**2 + 3000**2 + 2400**2) * 1e-6)
        assert large.x.min.tolerance == large.tolerance


class TestRejections:
    def test_rotated_face_is_not_a_prism(self, make_box):
        faces = make_box()
        i = _x_max_index(faces)
        tilt = (
            Transform.translation(1.0, 0.5, 0.0)
            @ Transform.rotation(Axis.Z, math.radians(10))
            @ Transform.translation(-1.0, -0.5, 0.0)
        )
        faces[i] = _shift_face(faces[i], tilt)

        result = PlaneClassifier().classify(faces)

        assert not result.ok
        assert result.error.kind is ErrorKind.NOT_A_PRISM
        with pytest.raises(NotAPrismError):
            result.unwrap()

    def test_missing_face(self, make_box):
        result = PlaneClassifier().classify(make_box()[:-1])
        assert result.error.kind is ErrorKind.NOT_A_PRISM

    def test_no_faces(self):
        assert not PlaneClassifier().classify([]).ok

    def test_diagonal_boundary(self, make_box):
        faces = make_box()
        i = _x_max_index(faces)
        faces[i] = FaceEntity(
            normal=faces[i].normal,
            loops=[[
                Point3D(x=1.0, y=0.0, z=0.0),
                Point3D(x=1.0, y=1.0, z=0.0),
                Point3D(x=1.0, y=1.0, z=1.0),
                Point3D(x=1.0, y=0.5, z=1.0),
                Point3D(x=1.0, y=0.0, z=0.5),
            ]],
        )
        result = PlaneClassifier().classify(faces)
        assert "non-rectangular" in result.error.message

    def test_notched_boundary(self, make_box):
        faces = make_box()
        i = _x_max_index(faces)
        faces[i] = FaceEntity(
            normal=faces[i].normal,
            loops=[[
                Point3D(x=1.0, y=0.0, z=0.0),
                Point3D(x=1.0, y=1.0, z=0.0),
                Point3D(x=1.0, y=1.0, z=0.5),
                Point3D(x=1.0, y=0.5, z=0.5),
                Point3D(x=1.0, y=0.5, z=1.0),
                Point3D(x=1.0, y=0.0, z=1.0),
            ]],
        )
        result = PlaneClassifier().classify(faces)
        assert "single rectangle" in result.error.message


class TestGrouping:
    def test_faces_within_tolerance_merge(self, make_box):
        faces = make_box()
        i = _x_max_index(faces)
        faces.append(_shift_face(faces[i], Transform.translation(5e-7, 0.0, 0.0)))

        result = PlaneClassifier().classify(faces)

        assert result.ok
        assert result.unwrap().x.max.offset == pytest.approx(1.0)

    def test_faces_beyond_tolerance_stay_distinct(self, make_box):
        faces = make_box()
        i = _x_max_index(faces)
        faces.append(_shift_face(faces[i], Transform.translation(1e-3, 0.0, 0.0)))

        result = PlaneClassifier().classify(faces)

        assert not result.ok
        assert "found 3" in result.error.message


class TestTransform:
    def test_translation_moves_planes(self, make_box):
        result = PlaneClassifier().classify(make_box(), Transform.translation(10.0, 20.0, 5.0))
        planes = result.unwrap()

        assert planes.x.min.offset == pytest.approx(10.0)
        assert planes.y.max.offset == pytest.approx(21.0)
        assert planes.z.min.offset == pytest.approx(5.0)

    def test_quarter_turn_swaps_extents(self, make_box):
        faces = make_box(x=(0.0, 2.0))
        planes = PlaneClassifier().classify(faces, Transform.rotation(Axis.Z, math.pi / 2)).unwrap()
        dims = planes.dimensions()

        assert dims.length == pytest.approx(1.0)
        assert dims.width == pytest.approx(2.0)
        assert dims.height == pytest.approx(1.0)

    def test_holes_are_carried_in_world_space(self, make_box):
        faces = make_box(
            x=(0.0, 4.0), y=(0.0, 3.0), z=(0.0, 2.4),
            holes={(Axis.Y, Side.MIN): [(1.0, 2.0, 0.9, 2.1)]},
        )
        planes = PlaneClassifier().classify(faces, Transform.translation(1.0, 0.0, 0.0)).unwrap()

        (hole,) = planes.y.min.inner_loops
        assert min(p.x for p in hole) == pytest.approx(2.0)
        assert max(p.z for p in hole) == pytest.approx(2.1)


class TestHelpers:
    def test_edges_axis_aligned_rectangle(self):
        loop = [
            Point3D(x=0, y=0, z=0), Point3D(x=0, y=1, z=0),
            Point3D(x=0, y=1, z=1), Point3D(x=0, y=0, z=1),
        ]
        assert edges_axis_aligned(loop, Axis.Y, Axis.Z, 1e-6)

    def test_edges_axis_aligned_rejects_repeated_vertex(self):
        loop = [
            Point3D(x=0, y=0, z=0), Point3D(x=0, y=0, z=0),
            Point3D(x=0, y=1, z=0), Point3D(x=0, y=1, z=1), Point3D(x=0, y=0, z=1),
        ]
        assert not edges_axis_aligned(loop, Axis.Y, Axis.Z, 1e-6)

    def test_distinct_values_collapses_near_duplicates(self):
        assert distinct_values([1.0, 0.0, 1.0 + 1e-9, 0.0], 1e-6) == [0.0, 1.0]
