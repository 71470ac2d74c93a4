"""
===============================================================================
SEGMENT AND RAY TESTS
===============================================================================

Covers:

1. SEGMENT
   - Construction from coordinates and from Points
   - Immutability
   - Optional validation of zero-length segments
   - Visibility is presentation only (invisible walls still block rays)

2. RAY
   - Zero direction is rejected
   - from_angle() unit directions
   - look_at() re-aiming and normalization
   - set_origin() keeps the direction
   - cast() against a wall
   - copy() shares no state

Run with:
    python developer_tests/test_ray.py

Or with pytest:
    pytest developer_tests/test_ray.py -v
===============================================================================
"""

import sys
import math
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from ray_casting_clock.core.geometry import Point, InvalidGeometry
from ray_casting_clock.core.segment import Segment
from ray_casting_clock.core.ray import Ray


TOLERANCE = 1e-9


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


# =============================================================================
# SEGMENT
# =============================================================================

def test_segment_construction():
    print("\n" + "=" * 60)
    print("TEST: Segment construction")
    print("=" * 60)

    wall = Segment(0, 0, 10, 0)
    assert wall.a == Point(0, 0)
    assert wall.b == Point(10, 0)
    assert wall.visible is True
    assert_close(wall.length, 10.0, msg="length")
    assert wall.midpoint == Point(5.0, 0.0)
    assert wall.coords == ((0, 0), (10, 0))
    assert wall.to_dict() == {'a': {'x': 0, 'y': 0}, 'b': {'x': 10, 'y': 0}, 'visible': True}
    print(f"  {wall} - PASS")

    hidden = Segment.from_points(Point(1, 2), Point(3, 4), visible=False)
    assert hidden.visible is False
    assert hidden.coords == ((1, 2), (3, 4))
    assert "visible=False" in repr(hidden)


def test_segment_is_immutable():
    wall = Segment(0, 0, 10, 0)
    for name, value in (('a', Point(1, 1)), ('visible', False), ('extra', 1)):
        try:
            setattr(wall, name, value)
        except AttributeError:
            pass
        else:
            raise AssertionError(f"Setting '{name}' should have raised AttributeError")
    assert wall.a == Point(0, 0)
    assert wall.visible is True


def test_segment_endpoints_cannot_move_wall():
    wall = Segment(0, 0, 10, 0)
    before = hash(wall)
    walls = {wall}

    wall.a.x = 5
    wall.b.y = 3
    assert wall.a == Point(0, 0)
    assert wall.b == Point(10, 0)
    assert wall.coords == ((0, 0), (10, 0))
    assert hash(wall) == before
    assert wall in walls

    ray = Ray(Point(2, 5), Point(0, -1))
    assert ray.cast(wall) == Point(2.0, 0.0)


def test_segment_from_points_copies():
    a = Point(0, 0)
    wall = Segment.from_points(a, Point(1, 0))
    a.x = 99
    assert wall.a == Point(0, 0)


def test_segment_equality_and_hash():
    assert Segment(0, 0, 1, 1) == Segment(0, 0, 1, 1)
    assert Segment(0, 0, 1, 1) != Segment(0, 0, 1, 1, visible=False)
    assert len({Segment(0, 0, 1, 1), Segment(0, 0, 1, 1)}) == 1


def test_degenerate_segment():
    wall = Segment(2, 2, 2, 2)
    assert wall.is_degenerate
    try:
        wall.validate()
    except InvalidGeometry:
        pass
    else:
        raise AssertionError("validate() should reject a zero-length segment")

    try:
        Segment.checked(2, 2, 2, 2)
    except InvalidGeometry:
        pass
    else:
        raise AssertionError("checked() should reject a zero-length segment")

    assert not Segment.checked(0, 0, 1, 0).is_degenerate

    # Accepted by the default constructor, never hit
    ray = Ray(Point(0, 2), Point(1, 0))
    assert ray.cast(wall) is None
    print("  zero-length segment: rejected on demand, never hit - PASS")


def test_segment_to_shapely():
    line = Segment(0, 0, 3, 4).to_shapely()
    assert_close(line.length, 5.0, msg="shapely length")
    assert list(line.coords) == [(0.0, 0.0), (3.0, 4.0)]


def test_invisible_wall_blocks_rays():
    ray = Ray(Point(5, 5), Point(0, -1))
    visible = ray.cast(Segment(0, 0, 10, 0))
    hidden = ray.cast(Segment(0, 0, 10, 0, visible=False))
    assert visible == hidden == Point(5.0, 0.0)


# =============================================================================
# RAY
# =============================================================================

def test_zero_direction_rejected():
    try:
        Ray(Point(0, 0), Point(0, 0))
    except InvalidGeometry:
        print("  zero direction rejected - PASS")
    else:
        raise AssertionError("Should have raised InvalidGeometry")


def test_from_angle():
    ray = Ray.from_angle(Point(1, 1), 0.0)
    assert (ray.direction.x, ray.direction.y) == (1.0, 0.0)

    ray = Ray.from_angle(Point(1, 1), math.pi / 2)
    assert_close(ray.direction.x, 0.0, msg="dx")
    assert_close(ray.direction.y, 1.0, msg="dy")
    assert_close(ray.angle, math.pi / 2, msg="angle")

    for deg in (0.5, 33.0, 181.5, 359.5):
        ray = Ray.from_angle(Point(0, 0), math.radians(deg))
        assert_close(ray.direction.length(), 1.0, msg=f"unit length at {deg}")


def test_look_at():
    print("\n" + "=" * 60)
    print("TEST: look_at()")
    print("=" * 60)

    ray = Ray(Point(1, 1), Point(1, 0))
    ray.look_at(4, 5)
    assert_close(ray.direction.x, 0.6, msg="dx")
    assert_close(ray.direction.y, 0.8, msg="dy")
    assert ray.origin == Point(1, 1)
    print(f"  {ray} - PASS")

    wall = Segment(-10, 9, 10, 9)
    hit = ray.cast(wall)
    assert hit is not None
    assert_close(hit.x, 7.0, msg="hit x")
    assert_close(hit.y, 9.0, msg="hit y")


def test_look_at_own_origin_raises():
    ray = Ray(Point(1, 1), Point(1, 0))
    try:
        ray.look_at(1, 1)
    except InvalidGeometry:
        pass
    else:
        raise AssertionError("Should have raised InvalidGeometry")
    assert ray.direction == Point(1, 0)


def test_set_origin_keeps_direction():
    ray = Ray(Point(0, 0), Point(0.6, 0.8))
    origin = ray.origin
    ray.set_origin(3, -2)
    assert ray.origin == Point(3, -2)
    assert ray.origin is origin
    assert ray.direction == Point(0.6, 0.8)


def test_point_at():
    ray = Ray(Point(1, 2), Point(0.6, 0.8))
    p = ray.point_at(5)
    assert_close(p.x, 4.0, msg="x")
    assert_close(p.y, 6.0, msg="y")


def test_cast():
    ray = Ray(Point(5, 5), Point(0, -1))
    assert ray.cast(Segment(0, 0, 10, 0)) == Point(5.0, 0.0)
    assert ray.cast(Segment(0, 10, 10, 10)) is None
    assert ray.cast(Segment(0, 0, 5, 0)) is None


def test_ray_does_not_share_caller_points():
    origin = Point(0, 0)
    direction = Point(1, 0)
    first = Ray(origin, direction)
    second = Ray(Point(5, 5), direction)

    first.look_at(0, 10)
    first.set_origin(3, 3)
    assert second.direction == Point(1, 0)
    assert direction == Point(1, 0)
    assert origin == Point(0, 0)
    assert_close(first.direction.y, 1.0, msg="first ray re-aimed")


def test_copy_is_independent():
    ray = Ray(Point(0, 0), Point(1, 0))
    other = ray.copy()
    other.set_origin(5, 5)
    other.look_at(5, 10)
    assert ray.origin == Point(0, 0)
    assert ray.direction == Point(1, 0)


# =============================================================================
# TEST RUNNER
# =============================================================================

def run_all_tests():
    print("=" * 78)
    print("SEGMENT AND RAY TESTS")
    print("=" * 78)

    tests = [
        ("Segment construction", test_segment_construction),
        ("Segment immutability", test_segment_is_immutable),
        ("Segment endpoints are copies", test_segment_endpoints_cannot_move_wall),
        ("Segment.from_points copies", test_segment_from_points_copies),
        ("Segment equality", test_segment_equality_and_hash),
        ("Degenerate segment", test_degenerate_segment),
        ("Segment to Shapely", test_segment_to_shapely),
        ("Invisible wall", test_invisible_wall_blocks_rays),
        ("Zero direction", test_zero_direction_rejected),
        ("from_angle()", test_from_angle),
        ("look_at()", test_look_at),
        ("look_at() own origin", test_look_at_own_origin_raises),
        ("set_origin()", test_set_origin_keeps_direction),
        ("point_at()", test_point_at),
        ("cast()", test_cast),
        ("Ray copies caller points", test_ray_does_not_share_caller_points),
        ("copy()", test_copy_is_independent),
    ]

    passed = 0
    errors = []
    for name, test_func in tests:
        try:
            test_func()
            passed += 1
        except Exception as e:
            errors.append((name, str(e)))
            print(f"\n  FAILED: {name}")
            print(f"    Error: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)
    for name, error in errors:
        print(f"  - {name}: {error}")
    return not errors


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
