import pytest

from compls.constants import MAX_DELTA_VARINT_BYTES, MAX_QUANTIZED_VALUE
from compls.serialization import ByteReader, ByteWriter
from compls.serialization.encoding.zigzag import decode_zigzag, encode_zigzag, unzigzag, zigzag


@pytest.mark.parametrize('value, code', [
    (0, 0),
    (-1, 1),
    (1, 2),
    (-2, 3),
    (2, 4),
    (-64, 127),
    (63, 126),
    (64, 128),
    (2**31 - 1, 2**32 - 2),
    (-2**31, 2**32 - 1),
])
def test_zigzag_mapping(value, code):
    assert zigzag(value) == code
    assert unzigzag(code) == value


def test_unzigzag_negative_fails():
    with pytest.raises(ValueError):
        unzigzag(-1)


@pytest.mark.parametrize('value, encoded_size', [
    (0, 1),
    (-1, 1),
    (63, 1),
    (-64, 1),
    (64, 2),
    (-65, 2),
    (992, 2),
    (-8192, 2),
    (8192, 3),
])
def test_small_magnitudes_are_short(value, encoded_size):
    w = ByteWriter()
    encode_zigzag(w, value)
    data = w.finalize()
    assert len(data) == encoded_size
    r = ByteReader(data)
    assert decode_zigzag(r) == value
    r.finalize()


@pytest.mark.parametrize('value', [
    2 * MAX_QUANTIZED_VALUE,
    -2 * MAX_QUANTIZED_VALUE,
])
def test_largest_delta_fits_max_bytes(value):
    w = ByteWriter()
    w.write_signed(value, max_bytes=MAX_DELTA_VARINT_BYTES)
    r = ByteReader(w.finalize())
    assert r.read_signed(max_bytes=MAX_DELTA_VARINT_BYTES) == value
