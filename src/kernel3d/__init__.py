# -*- coding: utf-8 -*-
import logging

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("kernel3d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

logging.getLogger(__name__).addHandler(logging.NullHandler())

from kernel3d.tolerance import ANGLE_EPSILON, EPSILON
from kernel3d.errors import (
    GeometryError,
    InvalidLineError,
    NonAffineTransformError,
    NotClosedError,
    NotPlanarError,
    ScalarDivisionError,
    ZeroLengthVectorError,
)
from kernel3d.vector import ParallelIndicator, Point3d, Vector3d, vector_angle
from kernel3d.xform import Transform
from kernel3d.line import Line
from kernel3d.plane import Plane
from kernel3d.intersection import (
    IntersectionEvent,
    crossing_line_line,
    line_line,
    line_line_t_parameters,
    line_plane,
    plane_plane,
    plane_plane_plane,
)
from kernel3d.bbox import BoundingBox
from kernel3d.interval import Interval
from kernel3d.polyline import Polyline

__all__ = [
    "__version__",
    "EPSILON",
    "ANGLE_EPSILON",
    "GeometryError",
    "InvalidLineError",
    "NonAffineTransformError",
    "NotClosedError",
    "NotPlanarError",
    "ScalarDivisionError",
    "ZeroLengthVectorError",
    "ParallelIndicator",
    "Point3d",
    "Vector3d",
    "vector_angle",
    "Transform",
    "Line",
    "Plane",
    "IntersectionEvent",
    "crossing_line_line",
    "line_line",
    "line_line_t_parameters",
    "line_plane",
    "plane_plane",
    "plane_plane_plane",
    "BoundingBox",
    "Interval",
    "Polyline",
]
