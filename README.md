# earthsphere

A small simulation. A few thousand cells are spread evenly over a sphere along
a golden spiral. Each cell holds dirt, grass or water. Once a second, while
the simulation plays, every cell looks at its five nearest neighbours and may
change:

- dirt becomes grass when at least one neighbour is grass. Otherwise it becomes
  water when at least two neighbours are water.
- grass becomes water when at least two neighbours are water. Otherwise it
  becomes dirt when at least four neighbours are dirt.
- water becomes dirt when at least three neighbours are dirt.

Every cell starts as dirt. Click cells to seed grass and water, then watch
them spread.

## Installing

```
pip install .
```

This installs the `earthsphere` command and the pygame library it draws with.

## Running

```
earthsphere
```

By default the sphere holds 2500 cells. Use `--count` to choose another
number. It must be at least 1:

```
earthsphere --count 1000
```

Controls:

- drag with the left mouse button to orbit the camera around the sphere;
- scroll to zoom in and out;
- hover over a cell to preview the material it will turn into;
- click a cell to cycle it through dirt, grass and water;
- press Space to pause or resume the simulation;
- press R to turn every cell back to dirt.

The status line at the bottom left shows whether the simulation is playing or
paused.

## Using it as a library

The simulation does not depend on the window, so you can drive it directly:

```python
from earthsphere.pixels import Automaton, EarthMaterial

automaton = Automaton(2500)
automaton.click(0)            # dirt -> grass, returns the new material
changed = automaton.tick()    # one step of the rules; number of cells changed
automaton.toggle_playing()    # pause; tick() then does nothing and returns 0
automaton.reset()             # everything back to dirt
```

Other parts of the package can also be used on their own:

- **`earthsphere.pixels`**:
  - `next_state(material, neighbours)` applies the rules to a single cell.
  - `fibonacci_sphere(count)` gives the cell positions.
  - `five_closest_map(pixels)` maps each cell index to the materials and
    squared distances of its five nearest cells.
- **`earthsphere.camera.OrbitCamera`**:
  - holds the orbiting camera, configured by `CameraSettings`;
  - provides `orbit`, `zoom`, `forward`, `position` and `project`.
- **`earthsphere.app`**:
  - `material_color(material)` gives the sRGB colour a material is drawn with.
  - `pick(camera, automaton, mouse, width, height)` finds the cell under a
    screen point.

## Tests

```
pip install .[test]
pytest
```