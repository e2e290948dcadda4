"""Forces, integration and collision handling for soft bodies."""

from __future__ import annotations

from jellysim.body import Node, Softbody, Spring
from jellysim.vector import MIN_DIF, Vec2

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
GRAVITY = 0.04
FLOOR = SCREEN_HEIGHT

REPEL_FORCE = 1.0
SELF_REPEL_FORCE = 10.0
SELF_COLLISION_RADIUS = 3

STIFFNESS = 1.0
DAMP_COEF = 0.7

FRICTION = 0.9


def apply_spring_forces(spring: Spring) -> None:
    """Add the damped spring force to both end nodes' accelerations."""
    a, b = spring.node1, spring.node2
    spring.current_length = a.center.distance_to(b.center)
    direction = (a.center - b.center).normalized()
    damp = spring.damp_coef * direction.dot(a.velocity - b.velocity)
    force = spring.stiffness * (spring.rest_length - spring.current_length) - damp
    a.acceleration = a.acceleration + direction * force
    b.acceleration = b.acceleration - direction * force


def integrate(node: Node) -> None:
    """Advance a free node one step under gravity, stopping it at the floor."""
    if node.fixed:
        return
    accel = Vec2(node.acceleration.x / node.mass, node.acceleration.y / node.mass + GRAVITY)
    node.velocity = node.velocity + accel
    center = node.center + node.velocity * FRICTION
    if center.y > FLOOR:
        center = Vec2(center.x, FLOOR)
        node.velocity = Vec2()
    node.center = center
    node.acceleration = Vec2()


def point_inside(point: Vec2, body: Softbody) -> bool:
    """Ray-crossing test of a point against a body's outline.

    Points on an outline vertex, or within MIN_DIF of a crossed edge, count as inside.
    """
    edge = body.edge_points()
    inside = False
    for a, b in zip(edge[1:], edge):
        if point == a:
            return True
        if (a.y > point.y) != (b.y > point.y):
            slope = (point.x - a.x) * (b.y - a.y) - (b.x - a.x) * (point.y - a.y)
            if slope != 0 and -MIN_DIF < slope < MIN_DIF:
                return True
            if (slope < MIN_DIF) != (b.y < a.y):
                inside = not inside
    return inside


def softbody_collision(body: Softbody, other: Softbody) -> None:
    """Push nodes of ``body`` that have entered ``other`` back out and stop them."""
    left, top = other.bbox_top_left.x, other.bbox_top_left.y
    right, bottom = other.bbox_bottom_right.x, other.bbox_bottom_right.y
    for node in body.nodes:
        c = node.center
        if not (left < c.x < right and top < c.y < bottom):
            continue
        if not point_inside(c, other):
            continue
        distance = float(SCREEN_WIDTH)
        closest = None
        for index in other.edge_indexes:
            dist = c.distance_to(other.nodes[index].center)
            if dist < distance:
                distance, closest = dist, index
        if closest is None:
            continue
        # The push direction is measured against this body's node at the same index.
        direction = (c - body.nodes[closest].center).normalized()
        node.acceleration = node.acceleration - direction * (REPEL_FORCE * distance)
        node.velocity = Vec2()


def self_collision(node: Node, other: Node) -> None:
    """Apply a repulsion from ``node`` to ``other``'s acceleration."""
    dist = node.center.distance_to(other.center)
    direction = (node.center - other.center).normalized()
    other.acceleration = other.acceleration - direction * (SELF_REPEL_FORCE * dist)