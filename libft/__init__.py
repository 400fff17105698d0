"""Character, byte-buffer and string helpers modelled on the classic C routines."""

__version__ = "1.0.0"
__all__ = ["ctype", "memory", "cstr", "strtools", "output"]