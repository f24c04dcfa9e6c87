"""ddsview - DDS container reader and DXT5 decoder for image viewers"""

__version__ = "0.1.0"

# Main DDS class and decode entry points
from .dds import DDS, DecodedImage, DecodeResult, decode, decode_file, flip_vertically

# Header structures
from .headers import (
    DDS_HEADER,
    DDS_HEADER_DXT10,
    DDS_PIXELFORMAT,
)

# Enumerations and flags
from .enums import (
    DDSD,
    DDPF,
    DDSCAPS,
    FourCC,
    ClipMode,
)

# Errors
from .errors import (
    DDSError,
    FileReadError,
    TruncatedDataError,
    InvalidMagicError,
    InvalidHeaderSizeError,
    MissingHeaderFlagsError,
    MissingCapsError,
    UnsupportedFormatError,
    BlockBoundsError,
)

# CLI entry point
from .cli import main

__all__ = [
    '__version__',
    'DDS',
    'DecodedImage',
    'DecodeResult',
    'decode',
    'decode_file',
    'flip_vertically',
    'DDS_HEADER',
    'DDS_HEADER_DXT10',
    'DDS_PIXELFORMAT',
    'DDSD',
    'DDPF',
    'DDSCAPS',
    'FourCC',
    'ClipMode',
    'DDSError',
    'FileReadError',
    'TruncatedDataError',
    'InvalidMagicError',
    'InvalidHeaderSizeError',
    'MissingHeaderFlagsError',
    'MissingCapsError',
    'UnsupportedFormatError',
    'BlockBoundsError',
    'main',
]
