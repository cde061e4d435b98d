"""Unit tests for time-parameterized animations.

Tests cover:
- Progress interpolation and clamping
- Degenerate and not-yet-started animations
- apply/reverse round trips, alone and in sequences
- Moving hit records and points to world space
"""

import pytest

from conftest import assert_vector_close
from core.animation import (
    Animation,
    AnimationTrack,
    animate_intersection,
    animate_point,
    apply_animations,
    reverse_animations,
)
from core.color import Color
from core.ray import Ray
from core.vector import Vector3
from geometry.hittable import Intersection
from materials.material import Material


def _ray():
    return Ray(Vector3(1, 2, 3), Vector3(1, -1, 0.5).normalize())


class TestProgress:
    """Tests for the interpolation factor of one animation."""

    def test_progress_linear(self):
        """Progress grows linearly between start and end."""
        a = Animation.translation_of(10, 20, Vector3(1, 0, 0))
        assert a.progress(10) == pytest.approx(0.0)
        assert a.progress(15) == pytest.approx(0.5)

    def test_progress_capped_after_end(self):
        """Progress stays at 1 from end_time on."""
        a = Animation.translation_of(10, 20, Vector3(1, 0, 0))
        assert a.progress(20) == 1.0
        assert a.progress(1000) == 1.0

    def test_instant_animation(self):
        """start_time == end_time jumps straight to the final state."""
        a = Animation.translation_of(5, 5, Vector3(2, 0, 0))
        moved = apply_animations(Ray(Vector3.zero(), Vector3(0, 0, 1)), [a], 5)
        assert_vector_close(moved.origin, Vector3(2, 0, 0))


class TestApply:
    """Tests for apply_animations."""

    def test_translation_halfway(self):
        """Halfway through, half the translation is applied."""
        a = Animation.translation_of(0, 10, Vector3(10, 0, 0))
        moved = apply_animations(Ray(Vector3.zero(), Vector3(0, 0, 1)), [a], 5)
        assert_vector_close(moved.origin, Vector3(5, 0, 0))
        assert_vector_close(moved.direction, Vector3(0, 0, 1))

    def test_before_start_does_nothing(self):
        """An animation that has not started leaves the ray alone."""
        a = Animation.translation_of(10, 20, Vector3(10, 0, 0))
        ray = _ray()
        moved = apply_animations(ray, [a], 5)
        assert moved.origin == ray.origin
        assert moved.direction == ray.direction

    @pytest.mark.parametrize("time", [-100.0, 0.0, 15.0, 20.0, 1e6])
    def test_degenerate_never_alters(self, time):
        """start_time > end_time is always skipped."""
        a = Animation(20, 10, translation=Vector3(5, 5, 5), rotation_x=90.0)
        ray = _ray()
        for moved in (apply_animations(ray, [a], time), reverse_animations(ray, [a], time)):
            assert moved.origin == ray.origin
            assert moved.direction == ray.direction

    def test_rotation_about_center(self):
        """A rotation pivots about its own center."""
        a = Animation.rotation_around_z(0, 1, 180.0, Vector3(1, 0, 0))
        moved = apply_animations(Ray(Vector3(2, 0, 0), Vector3(1, 0, 0)), [a], 1)
        assert_vector_close(moved.origin, Vector3(0, 0, 0))
        assert_vector_close(moved.direction, Vector3(-1, 0, 0))

    def test_translate_then_rotate_order(self):
        """Inside one animation the translation happens before the rotation."""
        a = Animation(0, 1, translation=Vector3(1, 0, 0), rotation_z=90.0)
        moved = apply_animations(Ray(Vector3.zero(), Vector3(1, 0, 0)), [a], 1)
        assert_vector_close(moved.origin, Vector3(0, 1, 0))
        assert_vector_close(moved.direction, Vector3(0, 1, 0))

    def test_sequence_composes(self):
        """Successive animations accumulate."""
        animations = [
            Animation.translation_of(0, 1, Vector3(1, 0, 0)),
            Animation.translation_of(0, 1, Vector3(0, 2, 0)),
        ]
        moved = apply_animations(Ray(Vector3.zero(), Vector3(0, 0, 1)), animations, 1)
        assert_vector_close(moved.origin, Vector3(1, 2, 0))

    def test_direction_stays_unit(self):
        """Directions are renormalized after the transforms."""
        a = Animation(0, 1, rotation_x=33.0, rotation_y=-71.0, rotation_z=12.0)
        moved = apply_animations(_ray(), [a], 0.7)
        assert moved.direction.norm() == pytest.approx(1.0)


class TestReverse:
    """Tests for reverse_animations."""

    @pytest.mark.parametrize("animation", [
        Animation.translation_of(0, 10, Vector3(3, -4, 5)),
        Animation.rotation_around_x(0, 10, 75.0, Vector3(1, 1, 1)),
        Animation.rotation_around_y(0, 10, -120.0, Vector3(0, 5, 0)),
        Animation.rotation_around_z(0, 10, 200.0),
        Animation(0, 10, translation=Vector3(1, 2, 3), rotation_x=30.0, rotation_y=45.0,
                  rotation_z=60.0, rotation_center_y=Vector3(2, 0, 0)),
    ])
    def test_round_trip(self, animation):
        """apply followed by reverse restores the ray."""
        ray = _ray()
        back = reverse_animations(apply_animations(ray, [animation], 7.5), [animation], 7.5)
        assert_vector_close(back.origin, ray.origin)
        assert_vector_close(back.direction, ray.direction)

    def test_round_trip_sequence(self):
        """The round trip also holds for a sequence of animations."""
        animations = [
            Animation.translation_of(0, 5, Vector3(10, 0, 0)),
            Animation.rotation_around_y(2, 8, 90.0, Vector3(0, 0, 3)),
            Animation(1, 4, translation=Vector3(0, -2, 1), rotation_z=45.0),
        ]
        ray = _ray()
        for time in (0.0, 3.0, 6.0, 50.0):
            back = apply_animations(reverse_animations(ray, animations, time), animations, time)
            assert_vector_close(back.origin, ray.origin)
            assert_vector_close(back.direction, ray.direction)

    def test_scale_is_not_applied(self):
        """Scaling animations are recorded but leave rays unchanged."""
        a = Animation.scaling(0, 1, 3.0)
        assert a.scale == 3.0
        ray = _ray()
        moved = apply_animations(ray, [a], 1)
        assert_vector_close(moved.origin, ray.origin)
        assert_vector_close(moved.direction, ray.direction)


class TestWorldSpace:
    """Tests for moving points and hit records."""

    def test_animate_point(self):
        """Points follow translations and rotations."""
        animations = [Animation.translation_of(0, 2, Vector3(0, 0, 4))]
        assert_vector_close(animate_point(Vector3(1, 0, 0), animations, 1), Vector3(1, 0, 2))
        assert animate_point(Vector3(1, 0, 0), [], 1) == Vector3(1, 0, 0)

    def test_animate_intersection_rotates_normal_only(self):
        """The hit point is translated and rotated, the normal only rotated."""
        hit = Intersection(Vector3(1, 0, 0), Vector3(1, 0, 0), Material.diffuse(Color.white()))
        animations = [Animation(0, 1, translation=Vector3(0, 0, 5), rotation_z=90.0)]
        moved = animate_intersection(hit, animations, 1)
        assert_vector_close(moved.point, Vector3(0, 1, 5))
        assert_vector_close(moved.normal, Vector3(0, 1, 0))
        assert moved.material is hit.material


class TestAnimationTrack:
    """Tests for the per-entity animation list."""

    def test_keeps_order(self):
        """Animations come back in insertion order."""
        track = AnimationTrack()
        first = Animation.translation_of(0, 1, Vector3(1, 0, 0))
        second = Animation.rotation_around_x(1, 2, 90.0)
        track.add_animation(first)
        track.add_animation(second)
        assert track.get_animations() == [first, second]

    def test_returns_copy(self):
        """Mutating the returned list does not change the track."""
        track = AnimationTrack()
        track.add_animation(Animation.translation_of(0, 1, Vector3(1, 0, 0)))
        track.get_animations().clear()
        assert len(track.get_animations()) == 1
