"""Vector, matrix, quaternion and bounding-box maths, plus small string, file and timing helpers."""

__version__ = "1.0.0"
__all__ = ["aabb", "functions", "matrix", "quaternion", "utils", "vectors"]