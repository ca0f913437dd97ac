from pyconformal import complex_to_point
from pyconformal.projection import INT32_MAX, INT32_MIN


def test_origin_maps_to_centre():
    assert complex_to_point(0j, 1.0, 800) == (400, 400)


def test_lower_corner_maps_to_origin():
    assert complex_to_point(complex(-1, -1), 1.0, 800) == (0, 0)


def test_undefined_stays_undefined():
    assert complex_to_point(None, 1.0, 800) is None
    assert complex_to_point(None, 0.5, 10) is None


def test_scale_widens_visible_square():
    assert complex_to_point(complex(1, 1), 2.0, 800) == (600, 600)
    assert complex_to_point(0j, 2.0, 800) == (400, 400)


def test_truncates_toward_zero():
    # 401.596 and 398.404, rounding would give 402 and 398
    assert complex_to_point(complex(0.00399, -0.00399), 1.0, 800) == (401, 398)
    # -0.2 truncates to 0, not -1
    assert complex_to_point(complex(-1.0005, -1.0005), 1.0, 800) == (0, 0)


def test_saturates_to_int32():
    assert complex_to_point(complex(1e12, -1e12), 1.0, 800) == (INT32_MAX, INT32_MIN)
