"""Orbit camera that circles the origin, driven by mouse drag and scroll."""

from __future__ import annotations

import math
from dataclasses import dataclass

Vec3 = tuple[float, float, float]

PITCH_LIMIT = math.pi / 2 - 0.01
FIELD_OF_VIEW = math.pi / 4
NEAR_PLANE = 0.1


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return max(low, min(high, value))


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


@dataclass
class CameraSettings:
    """Tunable orbit parameters; the orbit distance changes as the user zooms."""

    orbit_distance: float = 5.0
    pitch_speed: float = 0.003
    pitch_range: tuple[float, float] = (-PITCH_LIMIT, PITCH_LIMIT)
    yaw_speed: float = 0.004
    zoom_speed: float = 0.05
    zoom_range: tuple[float, float] = (2.0, 10.0)


class OrbitCamera:
    """A camera looking at the origin from ``orbit_distance`` away."""

    def __init__(self, settings: CameraSettings | None = None) -> None:
        self.settings = settings if settings is not None else CameraSettings()
        self.yaw = 0.0
        self.pitch = 0.0

    def forward(self) -> Vec3:
        """Unit vector the camera is looking along."""
        cp = math.cos(self.pitch)
        return (-math.sin(self.yaw) * cp, math.sin(self.pitch), -math.cos(self.yaw) * cp)

    def _right(self) -> Vec3:
        return (math.cos(self.yaw), 0.0, -math.sin(self.yaw))

    def _up(self) -> Vec3:
        sp = math.sin(self.pitch)
        return (math.sin(self.yaw) * sp, math.cos(self.pitch), math.cos(self.yaw) * sp)

    def position(self) -> Vec3:
        """Where the camera sits, behind the origin along its forward axis."""
        d = self.settings.orbit_distance
        return tuple(-c * d for c in self.forward())

    def orbit(self, dx: float, dy: float, pressed: bool) -> None:
        """Rotate around the origin by a mouse movement while the button is held."""
        if not pressed:
            return
        delta_pitch = dy * -self.settings.pitch_speed
        delta_yaw = dx * -self.settings.yaw_speed
        self.pitch = _clamp(self.pitch + delta_pitch, self.settings.pitch_range)
        self.yaw = math.remainder(self.yaw + delta_yaw, math.tau)

    def zoom(self, scroll: float) -> None:
        """Scale the orbit distance by a scroll amount, within the zoom range."""
        s = self.settings
        s.orbit_distance = _clamp(
            s.orbit_distance * (1.0 - scroll * s.zoom_speed), s.zoom_range
        )

    def project(
        self, point: Vec3, width: float, height: float
    ) -> tuple[float, float, float] | None:
        """Screen coordinates and depth of ``point``, or None if it is behind the camera."""
        eye = self.position()
        rel = tuple(p - e for p, e in zip(point, eye))
        depth = _dot(rel, self.forward())
        if depth <= NEAR_PLANE:
            return None
        scale = (height / 2.0) / math.tan(FIELD_OF_VIEW / 2.0)
        sx = width / 2.0 + _dot(rel, self._right()) / depth * scale
        sy = height / 2.0 - _dot(rel, self._up()) / depth * scale
        return (sx, sy, depth)