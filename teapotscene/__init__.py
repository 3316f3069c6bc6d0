"""Transform maths, a yaw/pitch camera, OBJ meshes and scene data for a lit teapot scene."""

__version__ = "0.1.0"
__all__ = ["maths", "camera", "model", "scene"]