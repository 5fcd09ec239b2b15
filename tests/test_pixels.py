import math

import pytest

from earthsphere.pixels import (
    Automaton,
    EarthMaterial,
    Pixel,
    fibonacci_sphere,
    five_closest_map,
    next_state,
)

D, G, W = EarthMaterial.DIRT, EarthMaterial.GRASS, EarthMaterial.WATER


def test_material_cycle():
    assert D.next() is G
    assert G.next() is W
    assert W.next() is D


def test_pixel_defaults_to_dirt():
    assert Pixel((0.0, 0.0, 0.0)).material is D


def test_fibonacci_sphere_first_point_is_north_pole():
    points = fibonacci_sphere(10)
    assert points[0] == pytest.approx((0.0, 1.0, 0.0))


def test_fibonacci_sphere_points_on_unit_sphere():
    points = fibonacci_sphere(100)
    assert len(points) == 100
    for point in points:
        assert math.sqrt(sum(c * c for c in point)) == pytest.approx(1.0)


def test_fibonacci_sphere_y_descends():
    ys = [p[1] for p in fibonacci_sphere(50)]
    assert ys == sorted(ys, reverse=True)


def test_fibonacci_sphere_negative_count():
    with pytest.raises(ValueError):
        fibonacci_sphere(-1)


def test_five_closest_map_sizes():
    positions = fibonacci_sphere(20)
    result = five_closest_map([(p, D) for p in positions])
    assert sorted(result) == list(range(20))
    assert all(len(near) == 5 for near in result.values())

    small = five_closest_map([(p, D) for p in fibonacci_sphere(3)])
    assert all(len(near) == 2 for near in small.values())


def test_five_closest_map_finds_smallest_distances():
    positions = fibonacci_sphere(30)
    result = five_closest_map([(p, D) for p in positions])
    for i, near in result.items():
        all_distances = sorted(
            sum((a - b) ** 2 for a, b in zip(positions[i], other))
            for j, other in enumerate(positions)
            if j != i
        )
        assert sorted(d for _, d in near) == pytest.approx(all_distances[:5])


def test_five_closest_map_reports_materials():
    points = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0)]
    result = five_closest_map([(points[0], G), (points[1], W)])
    assert result[0] == [(W, pytest.approx(1.0))]
    assert result[1] == [(G, pytest.approx(1.0))]


@pytest.mark.parametrize(
    "material, neighbours, expected",
    [
        (D, [G, D, D, D, D], G),
        (D, [W, W, D, D, D], W),
        (D, [W, W, G, D, D], G),
        (D, [W, D, D, D, D], D),
        (G, [W, W, D, D, D], W),
        (G, [D, D, D, D, G], D),
        (G, [D, D, D, W, G], G),
        (W, [D, D, D, W, W], D),
        (W, [D, D, W, W, G], W),
    ],
)
def test_next_state_rules(material, neighbours, expected):
    assert next_state(material, neighbours) is expected


def test_all_dirt_is_stable():
    automaton = Automaton(40)
    assert automaton.tick() == 0
    assert all(p.material is D for p in automaton.pixels)


def test_click_cycles_material():
    automaton = Automaton(10)
    assert automaton.click(3) is G
    assert automaton.click(3) is W
    assert automaton.click(3) is D


def test_displayed_material_previews_next():
    automaton = Automaton(10)
    automaton.click(2)
    assert automaton.displayed_material(2, hovered=False) is G
    assert automaton.displayed_material(2, hovered=True) is W


def test_reset_restores_dirt():
    automaton = Automaton(10)
    automaton.click(0)
    automaton.click(5)
    automaton.click(5)
    automaton.reset()
    assert all(p.material is D for p in automaton.pixels)


def test_toggle_and_pause_stops_ticks():
    automaton = Automaton(30)
    assert automaton.status_text == "Playing"
    assert automaton.toggle_playing() is False
    assert automaton.status_text == "Paused"
    automaton.click(0)
    assert automaton.tick() == 0
    assert automaton.pixels[0].material is G
    assert automaton.toggle_playing() is True


def test_tick_matches_rules_on_snapshot():
    automaton = Automaton(60)
    for index in (0, 7, 7, 20, 33, 33, 45):
        automaton.click(index)
    before = [(p.position, p.material) for p in automaton.pixels]
    near = five_closest_map(before)
    expected = [
        next_state(material, [m for m, _ in near[i]])
        for i, (_, material) in enumerate(before)
    ]
    changed = automaton.tick()
    after = [p.material for p in automaton.pixels]
    assert after == expected
    assert changed == sum(a is not b for (_, a), b in zip(before, after))
    assert changed > 0


def test_lone_grass_dies_and_spreads():
    automaton = Automaton(60)
    automaton.click(30)
    automaton.tick()
    assert automaton.pixels[30].material is D
    assert sum(p.material is G for p in automaton.pixels) >= 1