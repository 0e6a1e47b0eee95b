"""Leaf-node geometry helpers for edge drawing. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_point(x: float, y: float) -> NDArray[np.float64]:
    return np.array([x, y], dtype=np.float64)


def lerp(start: NDArray[np.float64], end: NDArray[np.float64], t: float) -> tuple[float, float]:
    """Point at fraction t along start→end (t clamped to [0, 1])."""
    t = float(np.clip(t, 0.0, 1.0))
    p = start + (end - start) * t
    return (float(p[0]), float(p[1]))


def midpoint(start: NDArray[np.float64], end: NDArray[np.float64]) -> tuple[float, float]:
    return lerp(start, end, 0.5)


def heading(start: NDArray[np.float64], end: NDArray[np.float64]) -> float:
    """Direction of start→end in radians (atan2, screen coordinates)."""
    d = end - start
    return float(np.arctan2(d[1], d[0]))


def arrowhead_pose(
    start: NDArray[np.float64],
    end: NDArray[np.float64],
    setback: float,
) -> tuple[float, float, float]:
    """Centre and rotation (degrees) of an arrowhead pulled back from ``end``.

    The arrowhead sits ``setback`` units before the destination centre so it
    lands on the vertex outline instead of underneath the circle. The rotation
    points a default upward-facing triangle along the edge direction.
    """
    angle = heading(start, end)
    direction = np.array([np.cos(angle), np.sin(angle)])
    tip = end - direction * setback
    return (float(tip[0]), float(tip[1]), float(np.degrees(angle) + 90.0))


def triangle_points(cx: float, cy: float, size: float, angle_deg: float) -> NDArray[np.float64]:
    """Vertices of an isosceles triangle of width/height ``size`` centred on (cx, cy).

    At 0° the apex points up (negative y). Rotation is clockwise in screen space.
    """
    half = size / 2.0
    local = np.array([[0.0, -half], [half, half], [-half, half]])
    theta = np.radians(angle_deg)
    rot = np.array([[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]])
    return local @ rot.T + np.array([cx, cy])
