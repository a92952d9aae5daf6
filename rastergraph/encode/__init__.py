from .bmp import encode_indexed_bmp

__all__ = ["encode_indexed_bmp"]
