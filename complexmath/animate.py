"""
Watch rounding error pile up while walking around the unit circle.

Needs the optional plotting extra:  pip install complexmath[plot]

    python -m complexmath.animate
"""
import math
from typing import List

import matplotlib.pyplot as plt
import matplotlib.animation as animation

from complexmath.complex import Complex

# ───────────────────────── CONFIGURATION ──────────────────────────────────── #
STEPS = 360              # rotations per lap
INTERVAL_MS = 20         # delay between frames
PLANE_LIMIT = 1.25       # half-width of the complex-plane panel


def unit_circle_walk(steps: int = STEPS) -> List[Complex]:
    """
    Walk once around the unit circle in `steps` equal rotations.

    Each sample is the previous one multiplied by e^{i·2π/steps}, so the
    drift away from |z| = 1 shows how rounding accumulates.
    """
    if steps < 1:
        raise ValueError(f"steps must be positive, got {steps}")
    step = Complex(0.0, 2 * math.pi / steps).exponential()
    walk = [Complex(1.0, 0.0)]
    for _ in range(1, steps):
        walk.append(walk[-1] * step)
    return walk


def modulus_drift(walk: List[Complex]) -> List[float]:
    """|z| - 1 for every sample of a unit-circle walk."""
    return [z.abs() - 1.0 for z in walk]


def closing_error(walk: List[Complex]) -> Complex:
    """How far one more rotation lands from the starting point 1 + 0i."""
    if len(walk) < 2:
        return Complex(0.0, 0.0)
    step = walk[1].divide(walk[0])
    return walk[-1].multiply(step).subtract(walk[0])


def animate_walk(
    walk: List[Complex],
    *,
    interval: int = INTERVAL_MS,
    show: bool = True,
) -> animation.FuncAnimation:
    """
    Two panels: the walk in the complex plane, and its modulus drift per step.

    Returns the FuncAnimation so callers can save() it.
    """
    if not walk:
        raise ValueError("Nothing to animate: empty walk")
    drift = modulus_drift(walk)
    worst = max(max(map(abs, drift)), 1e-18)

    fig, (plane, err) = plt.subplots(1, 2, figsize=(10, 4.5))
    plane.set_aspect("equal")
    plane.set_xlim(-PLANE_LIMIT, PLANE_LIMIT)
    plane.set_ylim(-PLANE_LIMIT, PLANE_LIMIT)
    plane.set_xlabel("Re")
    plane.set_ylabel("Im")
    plane.grid(True, linestyle=":", alpha=0.4)

    err.set_xlim(0, len(walk))
    err.set_ylim(-1.1 * worst, 1.1 * worst)
    err.set_xlabel("step")
    err.set_ylabel("|z| - 1")
    err.axhline(0.0, color="grey", linewidth=0.8)
    fig.suptitle(f"closing error {closing_error(walk)}")

    head, = plane.plot([], [], "ro", markersize=6)
    path, = plane.plot([], [], "b-", alpha=0.5, linewidth=1)
    curve, = err.plot([], [], "g-", linewidth=1)

    def draw(frame: int):
        z = walk[frame]
        head.set_data([z.real], [z.imaginary])
        path.set_data([w.real for w in walk[:frame + 1]],
                      [w.imaginary for w in walk[:frame + 1]])
        curve.set_data(range(frame + 1), drift[:frame + 1])
        plane.set_title(f"step {frame}: {z}")
        return head, path, curve

    anim = animation.FuncAnimation(
        fig, draw, frames=len(walk), interval=interval, repeat=False,
    )
    if show:
        plt.show()
    return anim


if __name__ == "__main__":
    animate_walk(unit_circle_walk())
