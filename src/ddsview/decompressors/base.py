"""Base class for texture decompression"""
from abc import ABC, abstractmethod
import numpy as np


class TextureDecompressor(ABC):
    """Base class for texture decompression"""
    @abstractmethod
    def decompress(self, data: bytes, width: int, height: int, output: np.ndarray) -> np.ndarray:
        """
        Decompress texture data to RGBA8 format

        Args:
            data: Compressed texture data
            width: Texture width in pixels
            height: Texture height in pixels
            output: Zero-filled flat uint8 destination of at least
                width * height * 4 bytes, written in place

        Returns:
            The output array
        """
        pass
