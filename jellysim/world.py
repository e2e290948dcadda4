"""A collection of soft bodies advanced together one step at a time."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import permutations

from jellysim.body import Color, Softbody
from jellysim.physics import (
    DAMP_COEF,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    SELF_COLLISION_RADIUS,
    STIFFNESS,
    apply_spring_forces,
    integrate,
    self_collision,
    softbody_collision,
)


@dataclass
class World:
    """Soft bodies sharing a screen-sized space with a floor."""

    bodies: list[Softbody] = field(default_factory=list)
    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT

    def add(self, body: Softbody) -> None:
        """Put another body into the world."""
        self.bodies.append(body)

    def step(self) -> None:
        """Advance every body by one frame."""
        for body, other in permutations(self.bodies, 2):
            if body.overlaps(other):
                softbody_collision(body, other)

        for body in self.bodies:
            for spring in body.springs:
                apply_spring_forces(spring)

        for body in self.bodies:
            for node, other in permutations(body.nodes, 2):
                if node.center.distance_to(other.center) < SELF_COLLISION_RADIUS:
                    self_collision(node, other)

        for body in self.bodies:
            for node in body.nodes:
                integrate(node)
            body.update_bounds(self.width, self.height)


_DEFAULT_LAYOUT = (
    (50, 600, Color(255, 255, 100)),
    (450, 600, Color(255, 100, 255)),
    (850, 600, Color(255, 100, 100)),
    (250, 450, Color(100, 255, 255)),
    (650, 450, Color(100, 255, 100)),
    (450, 300, Color(100, 100, 255)),
)


def default_world() -> World:
    """Six 5x20 bodies stacked in a pyramid above the floor."""
    world = World()
    for offset_x, offset_y, color in _DEFAULT_LAYOUT:
        world.add(Softbody.grid(5, 20, 20, offset_x, offset_y, DAMP_COEF, STIFFNESS, color))
    return world