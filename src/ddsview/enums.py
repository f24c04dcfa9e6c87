"""DDS enumerations and flags"""
from enum import Enum, IntEnum, IntFlag


def make_fourcc(code: str) -> int:
    """Pack a 4-character code into its little-endian integer value"""
    return int.from_bytes(code.encode('ascii'), 'little')


DDS_MAGIC = 0x20534444  # "DDS " read as a little-endian uint32


class DDSD(IntFlag):
    """DDS_HEADER.dwFlags - which header members are valid"""
    CAPS = 0x1
    HEIGHT = 0x2
    WIDTH = 0x4
    PITCH = 0x8
    PIXELFORMAT = 0x1000
    MIPMAPCOUNT = 0x20000
    LINEARSIZE = 0x80000
    DEPTH = 0x800000


# Flags every readable header has to carry
DDSD_REQUIRED = DDSD.CAPS | DDSD.HEIGHT | DDSD.WIDTH | DDSD.PIXELFORMAT


class DDSCAPS(IntFlag):
    """DDS_HEADER.dwCaps - surface complexity"""
    COMPLEX = 0x8
    TEXTURE = 0x1000
    MIPMAP = 0x400000


class DDPF(IntFlag):
    """DDS_PIXELFORMAT.dwFlags"""
    ALPHAPIXELS = 0x1
    ALPHA = 0x2
    FOURCC = 0x4
    RGB = 0x40
    YUV = 0x200
    LUMINANCE = 0x20000


class FourCC(IntEnum):
    """Well-known four-character codes found in DDS_PIXELFORMAT.dwFourCC"""
    DXT1 = make_fourcc('DXT1')
    DXT2 = make_fourcc('DXT2')
    DXT3 = make_fourcc('DXT3')
    DXT4 = make_fourcc('DXT4')
    DXT5 = make_fourcc('DXT5')
    DX10 = make_fourcc('DX10')
    ATI1 = make_fourcc('ATI1')
    ATI2 = make_fourcc('ATI2')
    BC4U = make_fourcc('BC4U')
    BC4S = make_fourcc('BC4S')
    BC5U = make_fourcc('BC5U')
    BC5S = make_fourcc('BC5S')


class ClipMode(Enum):
    """How texels of partial edge blocks are clipped against the image"""
    STRICT = 'strict'  # clip column against width and row against height
    LEGACY = 'legacy'  # row offset against width only, as older viewers did
