"""Interactive window showing the automaton sphere through an orbit camera."""

from __future__ import annotations

import argparse
import math
from typing import Sequence

import pygame

from earthsphere.camera import FIELD_OF_VIEW, OrbitCamera
from earthsphere.pixels import DEFAULT_PIXEL_COUNT, Automaton, EarthMaterial

WINDOW_SIZE = (1280, 720)
PIXEL_RADIUS = 0.05
TICK_INTERVAL_MS = 1000
FRAME_RATE = 60
BACKGROUND = (30, 30, 34)
TEXT_COLOR = (240, 240, 240)
LIGHT_POSITION = (8.0, 16.0, 8.0)

_LINEAR_COLORS = {
    EarthMaterial.DIRT: (0.55, 0.44, 0.39),
    EarthMaterial.GRASS: (0.0, 1.0, 0.0),
    EarthMaterial.WATER: (0.25, 0.9, 1.0),
}


def _linear_to_srgb(channel: float) -> int:
    if channel <= 0.0031308:
        value = 12.92 * channel
    else:
        value = 1.055 * channel ** (1.0 / 2.4) - 0.055
    return max(0, min(255, round(value * 255)))


def material_color(material: EarthMaterial) -> tuple[int, int, int]:
    """The 8-bit sRGB colour a material is drawn with."""
    r, g, b = _LINEAR_COLORS[material]
    return (_linear_to_srgb(r), _linear_to_srgb(g), _linear_to_srgb(b))


def _screen_scale(height: float) -> float:
    return (height / 2.0) / math.tan(FIELD_OF_VIEW / 2.0)


def _visible(camera: OrbitCamera, automaton: Automaton, width: float, height: float):
    """Yield (index, screen x, screen y, screen radius, depth) for every visible pixel."""
    scale = _screen_scale(height)
    for index, pixel in enumerate(automaton.pixels):
        projected = camera.project(pixel.position, width, height)
        if projected is None:
            continue
        sx, sy, depth = projected
        yield index, sx, sy, PIXEL_RADIUS * scale / depth, depth


def pick(
    camera: OrbitCamera,
    automaton: Automaton,
    mouse: tuple[float, float],
    width: float,
    height: float,
) -> int | None:
    """Index of the nearest pixel under the mouse, or None if there is none."""
    mx, my = mouse
    best: tuple[int, float] | None = None
    for index, sx, sy, radius, depth in _visible(camera, automaton, width, height):
        if (sx - mx) ** 2 + (sy - my) ** 2 <= radius * radius:
            if best is None or depth < best[1]:
                best = (index, depth)
    return None if best is None else best[0]


def _shade(color: tuple[int, int, int], position) -> tuple[int, int, int]:
    lx, ly, lz = (l - p for l, p in zip(LIGHT_POSITION, position))
    length = math.sqrt(lx * lx + ly * ly + lz * lz) or 1.0
    facing = (position[0] * lx + position[1] * ly + position[2] * lz) / length
    brightness = 0.45 + 0.55 * max(0.0, facing)
    return tuple(min(255, round(c * brightness)) for c in color)


def _draw(
    surface: pygame.Surface,
    font: pygame.font.Font,
    camera: OrbitCamera,
    automaton: Automaton,
    hovered: int | None,
) -> None:
    width, height = surface.get_size()
    surface.fill(BACKGROUND)
    visible = sorted(
        _visible(camera, automaton, width, height), key=lambda item: item[4], reverse=True
    )
    for index, sx, sy, radius, _depth in visible:
        material = automaton.displayed_material(index, index == hovered)
        color = _shade(material_color(material), automaton.pixels[index].position)
        pygame.draw.circle(surface, color, (round(sx), round(sy)), max(1, round(radius)))

    status = font.render(
        f"Press Space to toggle automata state: {automaton.status_text}", True, TEXT_COLOR
    )
    surface.blit(status, (10, height - 10 - status.get_height()))
    reset = font.render("Press R to reset", True, TEXT_COLOR)
    surface.blit(reset, (width - 10 - reset.get_width(), height - 10 - reset.get_height()))


def run(count: int = DEFAULT_PIXEL_COUNT) -> None:
    """Open the window and run the simulation until it is closed."""
    automaton = Automaton(count)
    camera = OrbitCamera()

    pygame.init()
    try:
        surface = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        pygame.display.set_caption("earthsphere")
        font = pygame.font.Font(None, 18)
        clock = pygame.time.Clock()
        since_tick = 0
        pressed_on: int | None = None
        running = True

        while running:
            width, height = surface.get_size()
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_SPACE:
                        automaton.toggle_playing()
                    elif event.key == pygame.K_r:
                        automaton.reset()
                elif event.type == pygame.MOUSEMOTION:
                    dx, dy = event.rel
                    camera.orbit(dx, dy, bool(event.buttons[0]))
                elif event.type == pygame.MOUSEWHEEL:
                    camera.zoom(event.y)
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    pressed_on = pick(camera, automaton, event.pos, width, height)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    released_on = pick(camera, automaton, event.pos, width, height)
                    if released_on is not None and released_on == pressed_on:
                        automaton.click(released_on)
                    pressed_on = None

            since_tick += clock.tick(FRAME_RATE)
            while since_tick >= TICK_INTERVAL_MS:
                automaton.tick()
                since_tick -= TICK_INTERVAL_MS

            hovered = pick(camera, automaton, pygame.mouse.get_pos(), width, height)
            _draw(surface, font, camera, automaton, hovered)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(
        prog="earthsphere", description="Dirt, grass and water automaton on a sphere."
    )
    parser.add_argument(
        "--count",
        type=int,
        default=DEFAULT_PIXEL_COUNT,
        help="number of pixels on the sphere",
    )
    args = parser.parse_args(argv)
    if args.count < 1:
        parser.error("--count must be at least 1")
    run(args.count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())