from .vector import ZERO, Vector3

__all__ = ["Vector3", "ZERO"]
