import math
import random

from pyinstrument import Profiler

from mapmath import Viewport, get_smallest_surrounding_rectangle, polygon_intersects_polygon
from mapmath.geo import zoom_to_scale


def random_ring(rng, cx, cy, n=64, radius=50.0):
    ring = []
    for i in range(n):
        a = 2 * math.pi * i / n
        r = radius * rng.uniform(0.6, 1.0)
        ring.append((cx + r * math.cos(a), cy + r * math.sin(a)))
    ring.append(ring[0])
    return ring


def benchmark_large():
    rng = random.Random(1)
    view = Viewport({"x": 640, "y": 360, "k": zoom_to_scale(16), "r": 0.4}).set_dimensions(((0, 0), (1280, 720)))
    locs = [(rng.uniform(-0.01, 0.01), rng.uniform(-0.01, 0.01)) for _ in range(20_000)]
    rings = [random_ring(rng, rng.uniform(0, 1280), rng.uniform(0, 720)) for _ in range(500)]
    print(f"Loaded {len(locs)} locations and {len(rings)} rings")

    profiler = Profiler()
    profiler.start()

    N = 5
    print(f"Starting computation ({N} iterations)...")
    for _ in range(N):
        screen = [view.project(loc, True) for loc in locs]
        _back = [view.unproject(p, True) for p in screen]
        _extent = view.extent()
        for ring in rings:
            get_smallest_surrounding_rectangle(ring)
        for a, b in zip(rings, rings[1:]):
            polygon_intersects_polygon(a, b, "strict")
    print("Computation finished.")

    profiler.stop()

    profiler.print()

    # Optional: save to HTML
    with open("mapmath_profile.html", "w") as f:
        f.write(profiler.output_html())


if __name__ == "__main__":
    benchmark_large()
