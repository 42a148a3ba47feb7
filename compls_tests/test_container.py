import math
import unittest

import pytest

from compls import (
    CompactLineString,
    CorruptData,
    InvalidPrecision,
    LineString,
    NonFiniteCoordinate,
    Precision,
    PrecisionOverflow,
    TruncatedError,
)
from compls.constants import MAX_PRECISION, MAX_QUANTIZED_VALUE
from compls.delta import encode_deltas
from compls.quantizer import QuantizedPoint
from compls.utils.varint import encode_signed
from compls_tests.utils import ALMATY_LINESTRINGS, assert_linestring_almost_equal

SCENARIO = LineString([(76.9615707, 43.2746200), (76.9616699, 43.2747688)])


class CompactLineStringTestCase(unittest.TestCase):
    def test_concrete_scenario(self):
        compact = CompactLineString.try_compact(SCENARIO, 7)
        data = bytes(compact)
        expected = (
            b'\x07\x02'
            + encode_signed(769615707) + encode_signed(432746200)
            + encode_signed(992) + encode_signed(1488)
        )
        self.assertEqual(data, expected)
        self.assertEqual(
            encode_deltas([QuantizedPoint(769615707, 432746200), QuantizedPoint(769616699, 432747688)]),
            [QuantizedPoint(769615707, 432746200), QuantizedPoint(992, 1488)],
        )
        assert_linestring_almost_equal(SCENARIO, compact.linestring(), 7)

    def test_empty_line_string(self):
        for precision in (0, 2, 7):
            compact = CompactLineString.try_compact(LineString(), precision)
            self.assertEqual(bytes(compact), bytes([precision, 0]))
            self.assertEqual(compact.size(), 0)
            self.assertEqual(compact.linestring(), LineString())

    def test_deterministic(self):
        for ls in ALMATY_LINESTRINGS:
            self.assertEqual(bytes(ls.try_compact7()), bytes(ls.try_compact7()))
            self.assertEqual(CompactLineString.try_compact7(ls), CompactLineString.try_compact7(ls))

    def test_repeated_point_is_zero_delta(self):
        ls = LineString([(76.9615707, 43.27462), (76.9615707, 43.27462)])
        data = bytes(ls.try_compact7())
        # the second point is two one-byte zero deltas
        self.assertEqual(data[-2:], b'\x00\x00')
        decoded = CompactLineString.from_bytes(data).linestring()
        self.assertEqual(decoded[0], decoded[1])
        self.assertEqual(decoded, ls)

    def test_size_and_precision(self):
        for ls in ALMATY_LINESTRINGS:
            compact = ls.try_compact7()
            self.assertEqual(compact.size(), len(ls))
            self.assertEqual(compact.precision, 7)

    def test_compression_ratio(self):
        ls = ALMATY_LINESTRINGS[-1]
        data = bytes(ls.try_compact7())
        self.assertLess(len(data), 16 * len(ls) // 2)

    def test_named_variants(self):
        metric = LineString([(8567164.12, 5354281.55), (8567170.01, 5354290.99)])
        self.assertEqual(CompactLineString.try_compact2(metric).precision, 2)
        self.assertEqual(metric.try_compact2(), CompactLineString.try_compact(metric, Precision.TWO))
        self.assertEqual(SCENARIO.try_compact7(), CompactLineString.try_compact(SCENARIO, Precision.SEVEN))
        assert_linestring_almost_equal(metric, metric.try_compact2().linestring(), 2)

    def test_default_precision_from_settings(self):
        self.assertEqual(SCENARIO.try_compact(), SCENARIO.try_compact7())

    def test_accepts_plain_pairs(self):
        compact = CompactLineString.try_compact([(1.5, -2.25), (1.5, -2.0)], 2)
        self.assertEqual(compact.linestring(), LineString([(1.5, -2.25), (1.5, -2.0)]))

    def test_invalid_precision_before_any_point(self):
        # the NaN would fail if points were looked at first
        ls = LineString([(math.nan, 0.0)])
        for precision in (-1, MAX_PRECISION + 1):
            with self.assertRaises(InvalidPrecision):
                CompactLineString.try_compact(ls, precision)

    def test_overflow_reports_index(self):
        ls = LineString([(0.0, 0.0), (1.0, 1.0), (1e10, 1.0), (1e20, 1.0)])
        with self.assertRaises(PrecisionOverflow) as cm:
            CompactLineString.try_compact(ls, 7)
        self.assertEqual(cm.exception.index, 2)

    def test_overflow_boundary(self):
        bound = float(MAX_QUANTIZED_VALUE)
        compact = CompactLineString.try_compact(LineString([(0.0, 0.0), (bound, -bound)]), 0)
        self.assertEqual(compact.linestring(), LineString([(0.0, 0.0), (bound, -bound)]))

        with self.assertRaises(PrecisionOverflow) as cm:
            CompactLineString.try_compact(LineString([(0.0, 0.0), (bound, 0.0), (0.0, bound + 1)]), 0)
        self.assertEqual(cm.exception.index, 2)

    def test_non_finite_rejected(self):
        with self.assertRaises(NonFiniteCoordinate) as cm:
            CompactLineString.try_compact7(LineString([(0.0, 0.0), (math.inf, 0.0)]))
        self.assertEqual(cm.exception.index, 1)

    def test_negative_coordinates(self):
        ls = LineString([(-76.9615707, -43.27462), (-76.9616699, 43.2747688), (0.0000001, -0.0000001)])
        assert_linestring_almost_equal(ls, ls.try_compact7().linestring(), 7)


@pytest.mark.parametrize('ls', ALMATY_LINESTRINGS)
def test_round_trip_fixtures(ls):
    compact = ls.try_compact7()
    decoded = compact.linestring()
    assert len(decoded) == compact.size() == len(ls)
    assert_linestring_almost_equal(ls, decoded, 7)


@pytest.mark.parametrize('precision', range(MAX_PRECISION + 1))
def test_round_trip_bound_all_precisions(precision):
    ls = LineString([(12.3456789012, -98.7654321098), (12.3456, -98.7654), (-0.000123456, 0.0)])
    decoded = CompactLineString.try_compact(ls, precision).linestring()
    assert_linestring_almost_equal(ls, decoded, precision)


@pytest.mark.parametrize('ls', ALMATY_LINESTRINGS)
def test_dropping_last_byte_never_decodes(ls):
    data = bytes(ls.try_compact7())
    with pytest.raises(CorruptData):
        CompactLineString(data[:-1]).linestring()


@pytest.mark.parametrize('ls', ALMATY_LINESTRINGS)
def test_trailing_byte_is_corrupt(ls):
    data = bytes(ls.try_compact7())
    with pytest.raises(CorruptData):
        CompactLineString(data + b'\x00').linestring()


def test_truncated_varint_is_chained():
    # header declares one point, the second delta announces a byte that is not there
    data = b'\x07\x01\x02\x80'
    with pytest.raises(CorruptData) as exc_info:
        CompactLineString(data).linestring()
    assert isinstance(exc_info.value.__cause__, TruncatedError)


def test_missing_points():
    # 2 points declared, 4 body bytes: passes the header check, but the first delta is 3 bytes long
    data = b'\x07\x02\x80\x80\x01\x02'
    with pytest.raises(CorruptData):
        CompactLineString(data).linestring()


@pytest.mark.parametrize('data', [
    b'',
    b'\x07',
    b'\x0a\x00',
    b'\xff\x00',
    b'\x07\x80',
    b'\x07\x05\x00\x00',
    b'\x07\xff\xff\xff\xff\xff\xff\xff\xff\xff\xff\x01',
])
def test_from_bytes_rejects_bad_header(data):
    with pytest.raises(CorruptData):
        CompactLineString.from_bytes(data)


def test_from_bytes_accepts_valid():
    data = bytes(SCENARIO.try_compact7())
    compact = CompactLineString.from_bytes(bytearray(data))
    assert bytes(compact) == data
    assert compact.size() == 2
    assert hash(compact) == hash(SCENARIO.try_compact7())


def test_overlong_varint_is_corrupt():
    # 9 continuation bytes in a single delta, longer than any valid delta
    data = b'\x00\x01' + b'\x80' * 9 + b'\x01' + b'\x00'
    with pytest.raises(CorruptData):
        CompactLineString(data).linestring()


def test_decoded_point_out_of_range_is_corrupt():
    big = encode_signed(MAX_QUANTIZED_VALUE)
    data = b'\x00\x02' + big + b'\x00' + big + b'\x00'
    with pytest.raises(CorruptData):
        CompactLineString(data).linestring()


def test_repr():
    assert repr(CompactLineString(b'\x07\x00')) == "CompactLineString('0700')"
