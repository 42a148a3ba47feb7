from compls import LineString, parse_linestring

# Almaty street segments, in lon/lat degrees.
ALMATY_LINESTRINGS = [
    parse_linestring('76.9017028 43.1802978'),
    parse_linestring('76.8936157 43.2443809, 76.8936309 43.2442245'),
    parse_linestring('76.8397903 43.2167510, 76.8398132 43.2167587, 76.8408584 43.2169990'),
    parse_linestring('76.9756393 43.2715377, 76.9760818 43.2720947, 76.9766235 43.2728042'),
    parse_linestring(
        '76.9615707 43.2746200, 76.9616699 43.2747688, 76.9620742 43.2753715, 76.9627532 43.2764091, '
        '76.9629516 43.2765502, 76.9630584 43.2765998'
    ),
    parse_linestring(
        '76.9759140 43.2704200, 76.9757766 43.2705001, 76.9756774 43.2705917, 76.9755706 43.2707099, '
        '76.9754562 43.2708740, 76.9753875 43.2710494, 76.9754028 43.2711601, 76.9754638 43.2713012, '
        '76.9756011 43.2714843, 76.9756393 43.2715377'
    ),
]


def assert_linestring_almost_equal(expected: LineString, actual: LineString, precision: int) -> None:
    """Assert same length and every axis within half a unit of the last kept digit."""
    assert len(expected) == len(actual), f'{len(expected)} != {len(actual)}'
    # a few ulps on top of the quantization bound for the float division in dequantize
    tolerance = 0.5 * 10**-precision + 1e-12 * max((abs(v) for c in expected for v in c), default=0.0)
    for i, (c1, c2) in enumerate(zip(expected, actual)):
        assert abs(c1.x - c2.x) <= tolerance, f'point {i}: x {c1.x} != {c2.x}'
        assert abs(c1.y - c2.y) <= tolerance, f'point {i}: y {c1.y} != {c2.y}'
