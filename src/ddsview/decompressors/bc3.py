"""BC3 (DXT5) texture decompressor"""
import logging
import numpy as np
from numba import jit
from .base import TextureDecompressor
from ..enums import ClipMode
from ..errors import BlockBoundsError, TruncatedDataError

logger = logging.getLogger(__name__)

BLOCK_SIZE = 16


def expand_5bit(value):
    """Expand a 5-bit channel to 8 bits (works on ints and integer arrays)"""
    temp = value * 255 + 16
    return (temp // 32 + temp) // 32


def expand_6bit(value):
    """Expand a 6-bit channel to 8 bits (works on ints and integer arrays)"""
    temp = value * 255 + 32
    return (temp // 64 + temp) // 64


class BC3Decompressor(TextureDecompressor):
    """
    BC3 (DXT5) texture decompressor - NumPy vectorization + Numba JIT

    Palettes for every block are built with NumPy, then a JIT-compiled
    loop scatters the 16 texels of each block into the destination.

    Edge blocks are clipped according to ``clip``:

    - ``ClipMode.STRICT`` writes a texel only if its column is inside the
      width and its row is inside the height.
    - ``ClipMode.LEGACY`` reproduces the rule of older decoders, which
      compare the row offset inside the block against the width and never
      look at the height. Texels that would then land outside the
      destination buffer raise BlockBoundsError.
    """

    def __init__(self, clip: ClipMode = ClipMode.STRICT) -> None:
        self.clip = ClipMode(clip)

    @staticmethod
    @jit(nopython=True, cache=True)
    def _process_blocks_jit(colors, alpha_palettes, alpha_indices, color_indices, output, blocks_x, blocks_y, width, height, strict):
        """JIT-compiled block processing for BC3 decompression

        Returns -1 on success, otherwise the index of the first block that
        would write past the end of output.
        """
        num_blocks = blocks_x * blocks_y
        for block_idx in range(num_blocks):
            block_x = block_idx % blocks_x
            block_y = block_idx // blocks_x

            alpha_idx_bits = alpha_indices[block_idx]
            color_idx_bits = color_indices[block_idx]

            x_start = block_x * 4
            y_start = block_y * 4

            for pixel_idx in range(16):
                pixel_y = pixel_idx // 4
                pixel_x = pixel_idx % 4

                if strict:
                    if x_start + pixel_x >= width or y_start + pixel_y >= height:
                        continue
                elif x_start + pixel_y >= width:
                    continue

                out = ((y_start + pixel_y) * width + x_start + pixel_x) * 4
                if out + 4 > output.shape[0]:
                    return block_idx

                alpha_idx = (alpha_idx_bits >> (pixel_idx * 3)) & 0x7
                color_idx = (color_idx_bits >> (pixel_idx * 2)) & 0x3

                output[out + 0] = colors[block_idx, color_idx, 0]
                output[out + 1] = colors[block_idx, color_idx, 1]
                output[out + 2] = colors[block_idx, color_idx, 2]
                output[out + 3] = alpha_palettes[block_idx, alpha_idx]

        return -1

    @staticmethod
    def required_size(width: int, height: int) -> int:
        """Number of payload bytes covering a width x height surface"""
        blocks_x = (width + 3) // 4
        blocks_y = (height + 3) // 4
        return blocks_x * blocks_y * BLOCK_SIZE

    def decompress(self, data: bytes, width: int, height: int, output: np.ndarray) -> np.ndarray:
        """
        Decompress BC3 texture data to RGBA8 using vectorized NumPy operations

        BC3 stores 4x4 pixel blocks in 16 bytes each:
        - 1 byte: alpha0 endpoint
        - 1 byte: alpha1 endpoint
        - 6 bytes: 16 3-bit alpha indices (48 bits, little-endian)
        - 2 bytes: color0 (RGB565)
        - 2 bytes: color1 (RGB565)
        - 4 bytes: 16 2-bit color indices (one per pixel)
        """
        blocks_x = (width + 3) // 4
        blocks_y = (height + 3) // 4
        num_blocks = blocks_x * blocks_y

        needed = self.required_size(width, height)
        if len(data) < needed:
            raise TruncatedDataError(
                f"Not enough data for {blocks_x}x{blocks_y} DXT5 blocks. "
                f"Expected {needed} bytes, but only {len(data)} bytes available."
            )

        logger.debug("Decoding %dx%d DXT5 blocks (%dx%d pixels, clip=%s)",
                     blocks_x, blocks_y, width, height, self.clip.value)

        # Read all blocks at once
        blocks = np.frombuffer(data, dtype=np.uint8, count=needed).reshape(-1, 16)

        # Extract alpha endpoints for all blocks
        alpha0 = blocks[:, 0].astype(np.int32)
        alpha1 = blocks[:, 1].astype(np.int32)

        # Build alpha palettes for all blocks (vectorized)
        alpha_palettes = np.zeros((num_blocks, 8), dtype=np.uint8)
        alpha_palettes[:, 0] = alpha0
        alpha_palettes[:, 1] = alpha1

        # Determine mode (8-alpha vs 6-alpha) for all blocks
        eight_alpha_mode = alpha0 > alpha1

        # Interpolated alpha values; the 6-alpha mode pins codes 6 and 7 to 0 and 255
        alpha_palettes[:, 2] = np.where(eight_alpha_mode, (6 * alpha0 + alpha1) // 7, (4 * alpha0 + alpha1) // 5)
        alpha_palettes[:, 3] = np.where(eight_alpha_mode, (5 * alpha0 + 2 * alpha1) // 7, (3 * alpha0 + 2 * alpha1) // 5)
        alpha_palettes[:, 4] = np.where(eight_alpha_mode, (4 * alpha0 + 3 * alpha1) // 7, (2 * alpha0 + 3 * alpha1) // 5)
        alpha_palettes[:, 5] = np.where(eight_alpha_mode, (3 * alpha0 + 4 * alpha1) // 7, (alpha0 + 4 * alpha1) // 5)
        alpha_palettes[:, 6] = np.where(eight_alpha_mode, (2 * alpha0 + 5 * alpha1) // 7, 0)
        alpha_palettes[:, 7] = np.where(eight_alpha_mode, (alpha0 + 6 * alpha1) // 7, 255)

        # Alpha indices: bytes 2-7 as one 48-bit little-endian integer.
        # Texel k uses bits 3k..3k+2, so texel 5 straddles bytes 3 and 4.
        alpha_indices = np.zeros(num_blocks, dtype=np.int64)
        for byte in range(6):
            alpha_indices |= blocks[:, 2 + byte].astype(np.int64) << (8 * byte)

        # Extract color0 and color1 (RGB565) for all blocks
        c0_packed = blocks[:, 8].astype(np.int32) | (blocks[:, 9].astype(np.int32) << 8)
        c1_packed = blocks[:, 10].astype(np.int32) | (blocks[:, 11].astype(np.int32) << 8)

        # Unpack RGB565 to RGB888 for all blocks at once
        c0_r = expand_5bit(c0_packed >> 11)
        c0_g = expand_6bit((c0_packed & 0x07E0) >> 5)
        c0_b = expand_5bit(c0_packed & 0x001F)

        c1_r = expand_5bit(c1_packed >> 11)
        c1_g = expand_6bit((c1_packed & 0x07E0) >> 5)
        c1_b = expand_5bit(c1_packed & 0x001F)

        # Build color palettes for all blocks (BC3 always uses 4-color mode)
        colors = np.zeros((num_blocks, 4, 3), dtype=np.uint8)
        colors[:, 0, 0] = c0_r
        colors[:, 0, 1] = c0_g
        colors[:, 0, 2] = c0_b

        colors[:, 1, 0] = c1_r
        colors[:, 1, 1] = c1_g
        colors[:, 1, 2] = c1_b

        colors[:, 2, 0] = (2 * c0_r + c1_r) // 3
        colors[:, 2, 1] = (2 * c0_g + c1_g) // 3
        colors[:, 2, 2] = (2 * c0_b + c1_b) // 3

        colors[:, 3, 0] = (c0_r + 2 * c1_r) // 3
        colors[:, 3, 1] = (c0_g + 2 * c1_g) // 3
        colors[:, 3, 2] = (c0_b + 2 * c1_b) // 3

        # Extract color indices for all blocks
        color_indices = blocks[:, 12].astype(np.int64) | \
                       (blocks[:, 13].astype(np.int64) << 8) | \
                       (blocks[:, 14].astype(np.int64) << 16) | \
                       (blocks[:, 15].astype(np.int64) << 24)

        # Process all blocks using JIT-compiled function
        failed_block = self._process_blocks_jit(colors, alpha_palettes, alpha_indices, color_indices, output,
                                                blocks_x, blocks_y, width, height, self.clip is ClipMode.STRICT)
        if failed_block >= 0:
            raise BlockBoundsError(
                f"Block {failed_block} (x={failed_block % blocks_x}, y={failed_block // blocks_x}) "
                f"writes outside the {output.shape[0]}-byte destination buffer"
            )

        return output
