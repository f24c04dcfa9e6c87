"""Texture decompressor implementations"""
from .base import TextureDecompressor
from .bc3 import BC3Decompressor, expand_5bit, expand_6bit

__all__ = [
    'TextureDecompressor',
    'BC3Decompressor',
    'expand_5bit',
    'expand_6bit',
]
