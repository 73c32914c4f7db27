"""Tests for pre-layout validation."""

import pytest

from shellframer.core.classifier import PlaneClassifier
from shellframer.core.validator import Validator, overlaps
from shellframer.models import (
    Axis, ErrorKind, NotAPrismError, Point3D, Result, ShellDimensions, Side,
)

SHELL = {"x": (0.0, 4000.0), "y": (0.0, 3000.0), "z": (0.0, 2400.0)}


def _validate(faces, params):
    return Validator(params).validate(PlaneClassifier(params).classify(faces))


def _with_holes(make_box, *holes, wall=(Axis.Y, Side.MIN)):
    return make_box(**SHELL, holes={wall: list(holes)})


class TestAccepts:
    def test_plain_shell(self, shell_faces, mm_params):
        result = _validate(shell_faces, mm_params)

        assert result.ok
        assert result.unwrap() == ShellDimensions(length=4000.0, width=3000.0, height=2400.0)

    def test_shell_with_openings(self, shell_with_openings, mm_params):
        faces, _ = shell_with_openings.split()
        assert _validate(faces, mm_params).ok

    def test_explicit_dimensions_win(self, shell_faces, mm_params):
        planes = PlaneClassifier(mm_params).classify(shell_faces)
        dims = ShellDimensions(length=4000.0, width=3000.0, height=2000.0)

        result = Validator(mm_params).validate(planes, dims)

        assert result.error.kind is ErrorKind.DIMENSION_TOO_SMALL


class TestPrism:
    def test_failed_classification_passes_through(self, mm_params):
        result = Validator(mm_params).validate(Result.failure(NotAPrismError("no faces")))
        assert result.error.kind is ErrorKind.NOT_A_PRISM


class TestDimensions:
    def test_short_length(self, make_box, mm_params):
        result = _validate(make_box(x=(0.0, 200.0), y=(0.0, 3000.0), z=(0.0, 2400.0)), mm_params)

        assert result.error.kind is ErrorKind.DIMENSION_TOO_SMALL
        assert result.error.which == "length"
        assert "300 mm" in result.error.message

    def test_narrow_width(self, make_box, mm_params):
        result = _validate(make_box(x=(0.0, 4000.0), y=(0.0, 250.0), z=(0.0, 2400.0)), mm_params)
        assert result.error.which == "width"

    def test_low_height(self, make_box, mm_params):
        result = _validate(make_box(x=(0.0, 4000.0), y=(0.0, 3000.0), z=(0.0, 2000.0)), mm_params)

        assert result.error.which == "height"
        assert result.error.minimum == pytest.approx(2100.0)
        assert "2100 mm" in result.error.message

    def test_message_in_mm_for_meter_params(self, make_box):
        result = Validator().validate(
            PlaneClassifier().classify(make_box(x=(0.0, 4.0), y=(0.0, 3.0), z=(0.0, 2.0)))
        )
        assert "2100 mm" in result.error.message


class TestOpenings:
    def test_non_rectangular(self, make_box, mm_params):
        loop = [
            Point3D(x=1000.0, y=0.0, z=900.0),
            Point3D(x=1600.0, y=0.0, z=900.0),
            Point3D(x=1000.0, y=0.0, z=1600.0),
        ]
        result = _validate(_with_holes(make_box, loop), mm_params)
        assert result.error.kind is ErrorKind.NON_RECTANGULAR_OPENING

    def test_out_of_bounds(self, make_box, mm_params):
        result = _validate(_with_holes(make_box, (3500.0, 4200.0, 900.0, 2100.0)), mm_params)
        assert result.error.kind is ErrorKind.OPENING_OUT_OF_BOUNDS

    def test_narrow_opening(self, make_box, mm_params):
        result = _validate(_with_holes(make_box, (1000.0, 1200.0, 900.0, 2100.0)), mm_params)

        assert result.error.kind is ErrorKind.OPENING_TOO_SMALL
        assert result.error.which == "width"

    def test_short_opening(self, make_box, mm_params):
        result = _validate(_with_holes(make_box, (1000.0, 2000.0, 900.0, 1100.0)), mm_params)

        assert result.error.kind is ErrorKind.OPENING_TOO_SMALL
        assert result.error.which == "height"
        assert "300 mm" in result.error.message

    def test_overlapping_openings(self, make_box, mm_params):
        faces = _with_holes(
            make_box,
            (500.0, 1000.0, 900.0, 2100.0),
            (900.0, 1400.0, 1000.0, 2000.0),
        )
        result = _validate(faces, mm_params)

        assert result.error.kind is ErrorKind.OPENINGS_OVERLAP
        assert "Wall Y MIN" in result.error.message

    def test_stacked_openings_pass(self, make_box, mm_params):
        faces = _with_holes(
            make_box,
            (500.0, 1000.0, 300.0, 800.0),
            (900.0, 1400.0, 1200.0, 2100.0),
        )
        assert _validate(faces, mm_params).ok

    def test_openings_on_different_walls_never_overlap(self, make_box, mm_params):
        faces = make_box(**SHELL, holes={
            (Axis.Y, Side.MIN): [(500.0, 1000.0, 900.0, 2100.0)],
            (Axis.Y, Side.MAX): [(500.0, 1000.0, 900.0, 2100.0)],
        })
        assert _validate(faces, mm_params).ok

    def test_dimensions_checked_before_openings(self, make_box, mm_params):
        faces = make_box(
            x=(0.0, 4000.0), y=(0.0, 3000.0), z=(0.0, 2000.0),
            holes={(Axis.Y, Side.MIN): [(1000.0, 1100.0, 900.0, 1000.0)]},
        )
        assert _validate(faces, mm_params).error.kind is ErrorKind.DIMENSION_TOO_SMALL


class TestLimits:
    def test_opening_at_minimum_in_meters(self, make_box):
        faces = make_box(
            x=(0.0, 4.0), y=(0.0, 3.0), z=(0.0, 2.4),
            holes={(Axis.Y, Side.MIN): [(0.4, 0.7, 0.9, 2.1)]},
        )
        assert Validator().validate(PlaneClassifier().classify(faces)).ok

    def test_opening_just_under_minimum_in_meters(self, make_box):
        faces = make_box(
            x=(0.0, 4.0), y=(0.0, 3.0), z=(0.0, 2.4),
            holes={(Axis.Y, Side.MIN): [(0.4, 0.699, 0.9, 2.1)]},
        )
        result = Validator().validate(PlaneClassifier().classify(faces))
        assert result.error.which == "width"

    def test_height_at_minimum_in_meters(self, make_box):
        faces = make_box(x=(0.0, 4.0), y=(0.0, 3.0), z=(0.3, 2.4))
        assert Validator().validate(PlaneClassifier().classify(faces)).ok


class TestOverlaps:
    def test_touching_ranges_do_not_overlap(self):
        assert not overlaps((0.0, 1.0), (1.0, 2.0), 1e-6)

    def test_nested_ranges_overlap(self):
        assert overlaps((0.0, 3.0), (1.0, 2.0), 1e-6)
