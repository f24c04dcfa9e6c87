"""DDS header structures"""
import struct
from typing import List
from .enums import DDPF, DDSD, DDSCAPS
from .errors import TruncatedDataError

# size, flags, fourcc, bit count, r/g/b/a masks
_PIXELFORMAT = struct.Struct('<8I')
# size, flags, height, width, pitch, depth, mip count, 11 reserved
_HEADER_HEAD = struct.Struct('<18I')
# caps 1-4, reserved
_HEADER_CAPS = struct.Struct('<5I')
_DXT10 = struct.Struct('<5I')

_PIXELFORMAT_OFFSET = _HEADER_HEAD.size
_CAPS_OFFSET = _PIXELFORMAT_OFFSET + _PIXELFORMAT.size


def _require(data: bytes, size: int, name: str) -> None:
    if len(data) < size:
        raise TruncatedDataError(f"{name} needs {size} bytes, got {len(data)}")


class DDS_PIXELFORMAT:
    """Payload encoding description, 32 bytes inside DDS_HEADER"""
    SIZE = _PIXELFORMAT.size

    def __init__(self) -> None:
        self.dwSize: int = 32
        self.dwFlags: DDPF = DDPF(0)
        self.dwFourCC: int = 0  # four-cc packed little-endian, see enums.make_fourcc
        self.dwRGBBitCount: int = 0
        self.dwRBitMask: int = 0
        self.dwGBitMask: int = 0
        self.dwBBitMask: int = 0
        self.dwABitMask: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_PIXELFORMAT':
        _require(data, cls.SIZE, "DDS_PIXELFORMAT")

        ddspf = cls()
        (ddspf.dwSize, flags, ddspf.dwFourCC, ddspf.dwRGBBitCount,
         ddspf.dwRBitMask, ddspf.dwGBitMask, ddspf.dwBBitMask,
         ddspf.dwABitMask) = _PIXELFORMAT.unpack_from(data)
        ddspf.dwFlags = DDPF(flags)
        return ddspf

    def has_fourcc(self, fourcc: int) -> bool:
        """True if the FOURCC flag is set and dwFourCC equals the given code"""
        return bool(self.dwFlags & DDPF.FOURCC) and self.dwFourCC == fourcc


class DDS_HEADER:
    """
    Basic DDS header, the 124 bytes after the magic.

    Carries the authoritative surface extents. Nothing is validated here;
    DDS.from_bytes decides which values are acceptable.
    """
    SIZE = _CAPS_OFFSET + _HEADER_CAPS.size

    def __init__(self) -> None:
        self.dwSize: int = 124
        self.dwFlags: DDSD = DDSD(0)
        self.dwHeight: int = 0
        self.dwWidth: int = 0
        self.dwPitchOrLinearSize: int = 0
        self.dwDepth: int = 0  # volume textures only, 0 otherwise
        self.dwMipMapCount: int = 0
        self.dwReserved1: List[int] = [0] * 11
        self.ddspf: DDS_PIXELFORMAT = DDS_PIXELFORMAT()
        self.dwCaps: DDSCAPS = DDSCAPS(0)
        self.dwCaps2: int = 0  # cubemap/volume bits, not interpreted
        self.dwCaps3: int = 0
        self.dwCaps4: int = 0
        self.dwReserved2: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER':
        _require(data, cls.SIZE, "DDS_HEADER")

        header = cls()
        head = _HEADER_HEAD.unpack_from(data)
        (header.dwSize, flags, header.dwHeight, header.dwWidth,
         header.dwPitchOrLinearSize, header.dwDepth, header.dwMipMapCount) = head[:7]
        header.dwFlags = DDSD(flags)
        header.dwReserved1 = list(head[7:])

        header.ddspf = DDS_PIXELFORMAT.from_bytes(data[_PIXELFORMAT_OFFSET:_CAPS_OFFSET])

        (caps, header.dwCaps2, header.dwCaps3, header.dwCaps4,
         header.dwReserved2) = _HEADER_CAPS.unpack_from(data, _CAPS_OFFSET)
        header.dwCaps = DDSCAPS(caps)
        return header


class DDS_HEADER_DXT10:
    """
    DX10 extension header (20 bytes), present when the four-cc is "DX10".

    Only its size matters for locating the payload, so the fields stay
    raw integers.
    """
    SIZE = _DXT10.size

    def __init__(self) -> None:
        self.dxgiFormat: int = 0
        self.resourceDimension: int = 0
        self.miscFlag: int = 0
        self.arraySize: int = 0
        self.miscFlags2: int = 0

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS_HEADER_DXT10':
        _require(data, cls.SIZE, "DDS_HEADER_DXT10")

        header10 = cls()
        (header10.dxgiFormat, header10.resourceDimension, header10.miscFlag,
         header10.arraySize, header10.miscFlags2) = _DXT10.unpack_from(data)
        return header10
