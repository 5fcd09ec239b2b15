"""Cellular automaton of earth materials laid out on the surface of a sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence

Vec3 = tuple[float, float, float]

DEFAULT_PIXEL_COUNT = 2500
NEIGHBOUR_COUNT = 5
GOLDEN_ANGLE_STEP = 1.618034


class EarthMaterial(Enum):
    """What a pixel on the sphere is made of."""

    DIRT = "dirt"
    GRASS = "grass"
    WATER = "water"

    def next(self) -> EarthMaterial:
        """Return the material that follows this one in the click cycle."""
        return _CYCLE[self]


_CYCLE = {
    EarthMaterial.DIRT: EarthMaterial.GRASS,
    EarthMaterial.GRASS: EarthMaterial.WATER,
    EarthMaterial.WATER: EarthMaterial.DIRT,
}


@dataclass
class Pixel:
    """A single cell of the automaton at a fixed point on the unit sphere."""

    position: Vec3
    material: EarthMaterial = EarthMaterial.DIRT


def fibonacci_sphere(count: int) -> list[Vec3]:
    """Spread ``count`` points over the unit sphere along a golden spiral."""
    if count < 0:
        raise ValueError("count must not be negative")
    points = []
    for i in range(count):
        y = 1.0 - (i / count) * 2.0
        radius = math.sqrt(max(0.0, 1.0 - y * y))
        theta = GOLDEN_ANGLE_STEP * i
        points.append((math.cos(theta) * radius, y, math.sin(theta) * radius))
    return points


def _distance_squared(a: Vec3, b: Vec3) -> float:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def _insert_closest(closest: list[tuple[int, float]], item: int, distance: float) -> None:
    if len(closest) < NEIGHBOUR_COUNT:
        closest.append((item, distance))
        return
    farthest = max(d for _, d in closest)
    if distance < farthest:
        slot = next(k for k, (_, d) in enumerate(closest) if d == farthest)
        closest[slot] = (item, distance)


def _closest_indices(positions: Sequence[Vec3]) -> list[list[tuple[int, float]]]:
    """For each position, the indices and squared distances of its nearest others."""
    closest: list[list[tuple[int, float]]] = [[] for _ in positions]
    for i, position in enumerate(positions):
        for j, other in enumerate(positions[i + 1 :], start=i + 1):
            distance = _distance_squared(position, other)
            _insert_closest(closest[i], j, distance)
            _insert_closest(closest[j], i, distance)
    return closest


def five_closest_map(
    pixels: Sequence[tuple[Vec3, EarthMaterial]],
) -> dict[int, list[tuple[EarthMaterial, float]]]:
    """Map each pixel index to the materials and squared distances of its five nearest pixels."""
    positions = [position for position, _ in pixels]
    materials = [material for _, material in pixels]
    return {
        index: [(materials[j], distance) for j, distance in near]
        for index, near in enumerate(_closest_indices(positions))
    }


def next_state(material: EarthMaterial, neighbours: Iterable[EarthMaterial]) -> EarthMaterial:
    """Apply the automaton rules to one pixel given its neighbours' materials."""
    neighbours = list(neighbours)
    water = neighbours.count(EarthMaterial.WATER)
    grass = neighbours.count(EarthMaterial.GRASS)
    dirt = neighbours.count(EarthMaterial.DIRT)
    if material is EarthMaterial.DIRT:
        if grass >= 1:
            return EarthMaterial.GRASS
        if water >= 2:
            return EarthMaterial.WATER
    elif material is EarthMaterial.GRASS:
        if water >= 2:
            return EarthMaterial.WATER
        if dirt >= 4:
            return EarthMaterial.DIRT
    elif material is EarthMaterial.WATER and dirt >= 3:
        return EarthMaterial.DIRT
    return material


class Automaton:
    """The whole sphere of pixels together with its play/pause state."""

    def __init__(self, count: int = DEFAULT_PIXEL_COUNT) -> None:
        self.pixels = [Pixel(position) for position in fibonacci_sphere(count)]
        self.playing = True
        self._neighbours: list[list[int]] | None = None

    @property
    def status_text(self) -> str:
        return "Playing" if self.playing else "Paused"

    def _neighbour_indices(self) -> list[list[int]]:
        if self._neighbours is None:
            positions = [pixel.position for pixel in self.pixels]
            self._neighbours = [
                [j for j, _ in near] for near in _closest_indices(positions)
            ]
        return self._neighbours

    def tick(self) -> int:
        """Advance one generation if playing; return how many pixels changed."""
        if not self.playing:
            return 0
        snapshot = [pixel.material for pixel in self.pixels]
        changed = 0
        for pixel, near in zip(self.pixels, self._neighbour_indices()):
            new = next_state(pixel.material, (snapshot[j] for j in near))
            if new is not pixel.material:
                pixel.material = new
                changed += 1
        return changed

    def reset(self) -> None:
        """Turn every pixel back to dirt."""
        for pixel in self.pixels:
            pixel.material = EarthMaterial.DIRT

    def toggle_playing(self) -> bool:
        """Flip between playing and paused; return the new state."""
        self.playing = not self.playing
        return self.playing

    def click(self, index: int) -> EarthMaterial:
        """Cycle the material of the pixel at ``index`` and return the new one."""
        pixel = self.pixels[index]
        pixel.material = pixel.material.next()
        return pixel.material

    def displayed_material(self, index: int, hovered: bool) -> EarthMaterial:
        """The material to draw: a hovered pixel previews its next material."""
        material = self.pixels[index].material
        return material.next() if hovered else material