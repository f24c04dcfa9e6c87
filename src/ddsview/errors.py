"""Exceptions raised while reading and decoding DDS files"""


class DDSError(ValueError):
    """Base class for every DDS read or decode failure"""


class FileReadError(DDSError):
    """The source file could not be opened or read"""


class TruncatedDataError(DDSError):
    """The buffer ends before a structure or payload it must contain"""


class InvalidMagicError(DDSError):
    """The first four bytes are not "DDS " """


class InvalidHeaderSizeError(DDSError):
    """DDS_HEADER.dwSize is not 124"""


class MissingHeaderFlagsError(DDSError):
    """DDS_HEADER.dwFlags lacks CAPS, WIDTH, HEIGHT or PIXELFORMAT"""


class MissingCapsError(DDSError):
    """DDS_HEADER.dwCaps lacks DDSCAPS_TEXTURE"""


class UnsupportedFormatError(DDSError, NotImplementedError):
    """The payload is stored in a format other than DXT5"""


class BlockBoundsError(DDSError):
    """A block texel would be written outside the destination buffer"""
