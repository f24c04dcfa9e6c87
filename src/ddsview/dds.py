"""Main DDS file handler"""
import logging
import os
import struct
from dataclasses import dataclass
from typing import Optional, Union
import numpy as np

from .enums import DDS_MAGIC, DDSD_REQUIRED, DDPF, DDSCAPS, DDSD, ClipMode, FourCC
from .errors import (
    DDSError,
    FileReadError,
    InvalidHeaderSizeError,
    InvalidMagicError,
    MissingCapsError,
    MissingHeaderFlagsError,
    TruncatedDataError,
    UnsupportedFormatError,
)
from .headers import DDS_HEADER, DDS_HEADER_DXT10
from .decompressors import TextureDecompressor, BC3Decompressor

logger = logging.getLogger(__name__)

COMPONENTS = 4  # RGBA8 destination, fixed


def _format_flags(value: int, flag_enum) -> str:
    """
    Format an integer flag value as a list of flag names separated by ' | '.

    Args:
        value: The integer flag value
        flag_enum: The IntFlag enum class to use for decoding

    Returns:
        String with flag names separated by ' | ', or '0' if no flags are set
    """
    if value == 0:
        return '0'

    # Get all set flags
    flags = []
    for flag in flag_enum:
        if value & flag:
            flags.append(flag.name)

    if not flags:
        return f'0x{value:X}'

    return ' | '.join(flags)


def _fourcc_str(fourcc: int) -> str:
    try:
        return FourCC(fourcc).name
    except ValueError:
        # Unknown FourCC, display as bytes
        return fourcc.to_bytes(4, 'little').decode('ascii', errors='replace')


@dataclass
class DecodedImage:
    """
    Decoded RGBA8 surface.

    ``pixels`` has shape (depth, height, width, 4) and dtype uint8. Only
    slice 0 is decoded; further depth slices stay zero.
    """
    width: int
    height: int
    depth: int
    pixels: np.ndarray
    components: int = COMPONENTS

    def tobytes(self) -> bytes:
        """Row-major RGBA bytes, width * height * depth * 4 long"""
        return self.pixels.tobytes()

    def to_array(self) -> np.ndarray:
        """Slice 0 as a (height, width, 4) array, ready for imageio"""
        return self.pixels[0]


@dataclass
class DecodeResult:
    """Outcome of a single decode() call"""
    ok: bool
    width: int = 0
    height: int = 0
    depth: int = 0
    image: Optional[DecodedImage] = None
    error: Optional[DDSError] = None

    @property
    def message(self) -> str:
        """Error text of a failed decode, empty on success"""
        return str(self.error) if self.error is not None else ''


def flip_vertically(image: DecodedImage) -> DecodedImage:
    """
    Reverse the row order of the first depth slice in place.

    Row i is exchanged with row height - 1 - i; flipping twice restores
    the original buffer.
    """
    rows = image.pixels[0]
    rows[:] = rows[::-1].copy()
    logger.debug("Flipped %d rows", image.height)
    return image


class DDS:
    """DirectDraw Surface container"""
    def __init__(self) -> None:
        self.magic: bytes = b'DDS '  # Magic number (always "DDS ")
        self.header: DDS_HEADER = DDS_HEADER()
        self.header10: Optional[DDS_HEADER_DXT10] = None  # Optional DX10 extended header
        self.data: Union[bytes, memoryview] = b''  # Payload following the headers

    def __str__(self) -> str:
        """Return debug string representation of DDS file"""
        lines = ["DDS File Information:"]
        lines.append(f"  Magic: {self.magic}")
        lines.append(f"  Dimensions: {self.header.dwWidth}x{self.header.dwHeight}")
        lines.append(f"  Depth: {self.header.dwDepth}")
        lines.append(f"  Mipmap Levels: {self.get_mip_count()}")
        lines.append(f"  Flags: {_format_flags(self.header.dwFlags, DDSD)}")
        lines.append(f"  Format: {self.get_format_str()}")

        if self.header10:
            lines.append(f"    DXGI Format: {self.header10.dxgiFormat}")
            lines.append(f"    Resource Dimension: {self.header10.resourceDimension}")
            if self.header10.arraySize > 1:
                lines.append(f"    Array Size: {self.header10.arraySize}")

        lines.append(f"  Caps: {_format_flags(self.header.dwCaps, DDSCAPS)}")
        lines.append(f"  Data Size: {len(self.data)} bytes")

        return "\n".join(lines)

    @classmethod
    def from_bytes(cls, data: bytes) -> 'DDS':
        """Read DDS from bytes, validating the container headers"""
        if len(data) < 128:  # Minimum: 4 (magic) + 124 (header)
            raise TruncatedDataError(f"Data too small for DDS file: {len(data)} bytes")

        dds = cls()
        offset = 0

        # Read and validate magic number
        (magic,) = struct.unpack_from('<I', data, offset)
        if magic != DDS_MAGIC:
            raise InvalidMagicError("Not a DDS file.")
        dds.magic = bytes(data[offset:offset+4])
        offset += 4

        # Read DDS header
        dds.header = DDS_HEADER.from_bytes(data[offset:offset+124])
        offset += 124

        if dds.header.dwSize != DDS_HEADER.SIZE:
            raise InvalidHeaderSizeError(f"Invalid DDS header size: {dds.header.dwSize} (expected 124)")

        missing = DDSD(DDSD_REQUIRED & ~int(dds.header.dwFlags))
        if missing:
            raise MissingHeaderFlagsError(f"DDS header is missing required flags: {_format_flags(missing, DDSD)}")

        if not dds.header.dwCaps & DDSCAPS.TEXTURE:
            raise MissingCapsError("DDS header caps do not include DDSCAPS_TEXTURE")

        # Check if DX10 extended header is present
        if dds.header.ddspf.has_fourcc(FourCC.DX10):
            if len(data) < offset + DDS_HEADER_DXT10.SIZE:
                raise TruncatedDataError("Incomplete DX10 header")
            dds.header10 = DDS_HEADER_DXT10.from_bytes(data[offset:offset+20])
            offset += 20

        dds.data = data[offset:]

        logger.debug("Parsed DDS header: %dx%dx%d, %s, %d payload bytes",
                     dds.get_width(), dds.get_height(), dds.get_depth(),
                     dds.get_format_str(), len(dds.data))
        return dds

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> 'DDS':
        """Read DDS from a file on disk"""
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise FileReadError(f"Failed to open file: {os.fspath(path)}") from e
        return cls.from_bytes(data)

    def get_width(self) -> int:
        """Get the width of the texture in pixels (at least 1)"""
        return max(1, self.header.dwWidth)

    def get_height(self) -> int:
        """Get the height of the texture in pixels (at least 1)"""
        return max(1, self.header.dwHeight)

    def get_depth(self) -> int:
        """Get the depth of the texture (at least 1)"""
        return max(1, self.header.dwDepth)

    def get_mip_count(self) -> int:
        """Get the number of mipmap levels"""
        return self.header.dwMipMapCount if self.header.dwMipMapCount > 0 else 1

    def is_dx10(self) -> bool:
        """True if the file carries a DX10 extended header"""
        return self.header10 is not None

    def get_format_str(self) -> str:
        """Get a human-readable format string"""
        ddspf = self.header.ddspf
        if ddspf.dwFlags & DDPF.FOURCC:
            fourcc = ddspf.dwFourCC
            return f"FourCC '{_fourcc_str(fourcc)}' (0x{fourcc:08X})"
        if ddspf.dwFlags & DDPF.RGB:
            alpha = " with alpha" if ddspf.dwFlags & DDPF.ALPHAPIXELS else ""
            return f"Uncompressed RGB ({ddspf.dwRGBBitCount}-bit){alpha}"
        return f"Other (flags: {_format_flags(ddspf.dwFlags, DDPF)})"

    def to_image(self, flip: bool = False, clip: ClipMode = ClipMode.STRICT) -> DecodedImage:
        """
        Decode the texture into an RGBA8 image

        Args:
            flip: Reverse the row order after decoding
            clip: Edge clipping rule for partial blocks

        Returns:
            DecodedImage whose pixel buffer holds width * height * depth * 4 bytes

        Raises:
            UnsupportedFormatError: If the payload is not DXT5
            TruncatedDataError: If the payload is shorter than the block grid
            BlockBoundsError: If legacy clipping would write past the buffer
        """
        ddspf = self.header.ddspf

        # DXT5 is the only payload format with a decompressor
        if not ddspf.has_fourcc(FourCC.DXT5):
            raise UnsupportedFormatError(f"Decompression not implemented for {self.get_format_str()}")
        decompressor: TextureDecompressor = BC3Decompressor(clip)

        width = self.get_width()
        height = self.get_height()
        depth = self.get_depth()

        pixels = np.zeros(width * height * depth * COMPONENTS, dtype=np.uint8)
        decompressor.decompress(self.data, width, height, pixels)

        image = DecodedImage(width, height, depth, pixels.reshape(depth, height, width, COMPONENTS))
        if flip:
            flip_vertically(image)
        return image


def decode(source: Union[str, os.PathLike, bytes, bytearray, memoryview],
           size: Optional[int] = None,
           flip: bool = False,
           clip: ClipMode = ClipMode.STRICT) -> DecodeResult:
    """
    Decode a DDS file or in-memory buffer without raising on bad input.

    Args:
        source: Path to a DDS file, or a bytes-like object holding one
        size: Number of bytes of ``source`` to use (buffers only)
        flip: Reverse the row order of the decoded image
        clip: Edge clipping rule for partial blocks

    Returns:
        DecodeResult. On failure ``error`` holds the exception, and the
        dimensions are filled in whenever the header itself was valid.
    """
    dds: Optional[DDS] = None
    try:
        if isinstance(source, (str, os.PathLike)):
            dds = DDS.from_file(source)
        else:
            if size is not None and size < 0:
                raise ValueError(f"size must not be negative, got {size}")
            # Offsets are in bytes whatever the caller's item type; the copy
            # leaves no export of the caller's buffer behind.
            with memoryview(source) as view, view.cast('B') as raw:
                data = bytes(raw[:size])
            dds = DDS.from_bytes(data)
        image = dds.to_image(flip=flip, clip=clip)
    except DDSError as e:
        logger.warning("DDS decode failed: %s", e)
        if dds is None:
            return DecodeResult(ok=False, error=e)
        return DecodeResult(ok=False, width=dds.get_width(), height=dds.get_height(),
                            depth=dds.get_depth(), error=e)

    return DecodeResult(ok=True, width=image.width, height=image.height, depth=image.depth, image=image)


def decode_file(path: Union[str, os.PathLike], flip: bool = False,
                clip: ClipMode = ClipMode.STRICT) -> DecodeResult:
    """Decode a DDS file on disk, see decode()"""
    return decode(os.fspath(path), flip=flip, clip=clip)
