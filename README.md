# dnahelix

An animated DNA double helix drawn with pygame. Two strands of spheres follow
a sine curve and a cosine curve across the window. Each sphere on the sine
strand carries a random base: adenine, thymine, guanine or cytosine. The
matching sphere on the cosine strand takes the complementary base and colour.
A bond joins each pair, and the bond's transparency depends on how far down
the pair is. Spheres grow and become more opaque as they move down the window.

## Installation

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Running

```
dnahelix
dnahelix --font path/to/font.ttf
```

This opens an 1100 × 800 window that runs at up to 120 frames per second. By
default the program loads the font `./ARIAL.TTF`. If it cannot load that file,
it prints a message to standard error and uses pygame's built-in font.

Keyboard controls:

| Key | Action |
| --- | --- |
| A | Start the standard animation (when nothing is running and the animation is not paused) |
| U | Start the special animation, which tears the helix down and rebuilds it whenever the sine strand reaches x = 400 |
| Space | Pause / resume |
| R | Reset everything |
| W | Switch between a white and a black background |
| T | Show / hide the base letters |
| S | Show / hide the sine strand |
| C | Show / hide the cosine strand |
| B | Show / hide the bonds |
| I | Show / hide statistics: base counts, strand lengths and the growth cooldown |
| O | Show / hide the overlay: running time and help text |
| P | Show / hide the flying airplane |
| 0 | Default curves: `sin(f·t1 + φ)` and `cos(f·t2 + φ)` |
| 1 | Toggle `sin(f·2t1 + φ)` and `cos(f·(2t1 + t2) + φ)` |
| 2 | Toggle `cos(f·2t2 + φ)` |
| Escape | Quit |

## Using the library

The animation state can be driven from code without a window. `Animator`
accepts `clock` and `wall_clock` callables, which return seconds, and an
optional `rng` (`random.Random`). Passing them in makes runs reproducible:

```python
import random

from dnahelix.animator import Animator, StatusBit
from dnahelix.app import start_animation, statistics_lines, step

now = [0.0]
animator = Animator(clock=lambda: now[0], wall_clock=lambda: now[0], rng=random.Random(1))
animator.initialize_start()
animator.initialize_time_points()
start_animation(animator, special=False)
animator.status_bits.add(StatusBit.SHOW_STATISTICS)

for _ in range(100):
    now[0] += 0.5
    step(animator, 1100.0, 800.0)

print(animator.elapsed_text())          # 00:50
for label in statistics_lines(animator):
    print(label.text)
```

Modules:

- `dnahelix.circle` has `Color`, the `Aminoacid` enumeration with
  `letter()`, `color()` and `complement()`, `Bond`, and `Circle`. A `Circle`
  moves along the curves with `change_y_sinus`, `change_y_cosinus` and
  `bounce_y`.
- `dnahelix.airplane` has `Airplane`. `move_x()` moves it back and forth
  between x = 60 and x = 500.
- `dnahelix.animator` has `Animator`, the `StatusBit` and `Animation` flags,
  `Statistics`, `DNA`, `Timestamps`, `Randomizer`, and `map_range`, the linear
  interpolation used for scale and transparency.
- `dnahelix.app` has `handle_key` (which takes pygame key names such as `"a"`,
  `"space"` and `"escape"`), `start_animation`, `step`, `overlay_lines`,
  `statistics_lines`, and `main`, the command's entry point.

`dnahelix.app` imports pygame when it is loaded. The other modules do not
need pygame.