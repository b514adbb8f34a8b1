import logging

from .errors import (
    GeometryError,
    InvalidRangeError,
    DegeneratePolygonError,
    NoOverlapError,
)
from .interval import Interval
from .point import Point, Vector
from .polygon import (
    Orientation,
    Polygon,
    xy_key,
    yx_key,
    create_mono_polygon,
    create_xmono_polygon,
    create_ymono_polygon,
)
from .rpolygon import (
    RPolygon,
    rbox,
    create_mono_rpolygon,
    create_xmono_rpolygon,
    create_ymono_rpolygon,
)
from .merge_obj import MergeObj, merge_clusters

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GeometryError",
    "InvalidRangeError",
    "DegeneratePolygonError",
    "NoOverlapError",
    "Interval",
    "Point",
    "Vector",
    "Orientation",
    "Polygon",
    "xy_key",
    "yx_key",
    "create_mono_polygon",
    "create_xmono_polygon",
    "create_ymono_polygon",
    "RPolygon",
    "rbox",
    "create_mono_rpolygon",
    "create_xmono_rpolygon",
    "create_ymono_rpolygon",
    "MergeObj",
    "merge_clusters",
]
