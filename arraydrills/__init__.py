"""Array, hashing, subarray and matrix algorithms over plain Python lists."""

__version__ = "0.1.0"
__all__ = ["basics", "rearrange", "hashing", "subarrays", "matrix"]