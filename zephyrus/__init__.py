"""Vector, matrix and quaternion maths, frame timing and AABB collision handling for game engines."""

__version__ = "0.1.0"