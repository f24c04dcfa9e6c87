"""Helpers that assemble synthetic DDS files for the tests"""
import struct

from ddsview.enums import DDSD_REQUIRED, DDSCAPS, DDPF

# RGB565 endpoints
RED = 0xF800
GREEN = 0x07E0
BLUE = 0x001F
WHITE = 0xFFFF


def make_header(width=4, height=4, depth=0, fourcc=b'DXT5', flags=DDSD_REQUIRED,
                caps=DDSCAPS.TEXTURE, pf_flags=DDPF.FOURCC, size=124, magic=b'DDS ',
                dx10=None, mipmaps=0) -> bytes:
    out = bytearray(magic)
    out += struct.pack('<7I', size, flags, height, width, 0, depth, mipmaps)
    out += struct.pack('<11I', *([0] * 11))
    out += struct.pack('<II4s5I', 32, pf_flags, fourcc, 0, 0, 0, 0, 0)
    out += struct.pack('<5I', caps, 0, 0, 0, 0)
    if dx10 is not None:
        out += struct.pack('<5I', *dx10)
    return bytes(out)


def make_block(alpha0=255, alpha1=0, alpha_codes=(0,) * 16,
               color0=RED, color1=BLUE, color_codes=(0,) * 16) -> bytes:
    """One 16-byte DXT5 block; codes are listed row by row"""
    alpha_bits = sum(code << (3 * k) for k, code in enumerate(alpha_codes))
    color_bits = sum(code << (2 * k) for k, code in enumerate(color_codes))
    return (struct.pack('<BB', alpha0, alpha1) + alpha_bits.to_bytes(6, 'little')
            + struct.pack('<HHI', color0, color1, color_bits))


def solid_block(color, alpha=255) -> bytes:
    return make_block(alpha0=alpha, alpha1=0, color0=color, color1=BLUE)


def make_dds(width, height, blocks, depth=0, **kwargs) -> bytes:
    return make_header(width=width, height=height, depth=depth, **kwargs) + b''.join(blocks)
