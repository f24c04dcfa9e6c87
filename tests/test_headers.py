import struct

import pytest

from ddsview.enums import DDPF, DDSCAPS, DDSD, FourCC, make_fourcc
from ddsview.errors import TruncatedDataError
from ddsview.headers import DDS_HEADER, DDS_HEADER_DXT10, DDS_PIXELFORMAT

from ddsbuild import make_header


def test_fourcc_is_little_endian():
    assert make_fourcc('DXT5') == 0x35545844
    assert FourCC.DX10 == struct.unpack('<I', b'DX10')[0]


def test_pixel_format_fields():
    data = struct.pack('<II4s5I', 32, DDPF.FOURCC | DDPF.ALPHAPIXELS, b'DXT5', 0, 1, 2, 3, 4)
    ddspf = DDS_PIXELFORMAT.from_bytes(data)
    assert ddspf.dwSize == 32
    assert ddspf.dwFlags == DDPF.FOURCC | DDPF.ALPHAPIXELS
    assert ddspf.dwFourCC == FourCC.DXT5
    assert (ddspf.dwRBitMask, ddspf.dwGBitMask, ddspf.dwBBitMask, ddspf.dwABitMask) == (1, 2, 3, 4)
    assert ddspf.has_fourcc(FourCC.DXT5)
    assert not ddspf.has_fourcc(FourCC.DX10)


def test_pixel_format_fourcc_needs_flag():
    data = struct.pack('<II4s5I', 32, DDPF.RGB, b'DXT5', 32, 0, 0, 0, 0)
    assert not DDS_PIXELFORMAT.from_bytes(data).has_fourcc(FourCC.DXT5)


def test_header_fields():
    raw = make_header(width=64, height=32, depth=3)[4:]
    header = DDS_HEADER.from_bytes(raw)
    assert header.dwSize == 124
    assert header.dwWidth == 64
    assert header.dwHeight == 32
    assert header.dwDepth == 3
    assert header.dwFlags & DDSD.PIXELFORMAT
    assert header.dwCaps == DDSCAPS.TEXTURE
    assert header.ddspf.dwFourCC == FourCC.DXT5
    assert header.dwReserved1 == [0] * 11


def test_dx10_header_fields():
    header10 = DDS_HEADER_DXT10.from_bytes(struct.pack('<5I', 77, 3, 0, 1, 0))
    assert header10.dxgiFormat == 77
    assert header10.resourceDimension == 3
    assert header10.arraySize == 1


@pytest.mark.parametrize("cls, size", [
    (DDS_PIXELFORMAT, 31),
    (DDS_HEADER, 123),
    (DDS_HEADER_DXT10, 19),
])
def test_short_structures_raise(cls, size):
    with pytest.raises(TruncatedDataError):
        cls.from_bytes(b'\x00' * size)
