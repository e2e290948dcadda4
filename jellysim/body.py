"""Soft bodies built as grids of point masses joined by springs."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from jellysim.vector import Vec2

NODE_MASS = 6
NODE_HALF_SIDE = 1


@dataclass(frozen=True)
class Color:
    """An RGB colour."""

    r: int
    g: int
    b: int


@dataclass(eq=False)
class Node:
    """A point mass."""

    center: Vec2
    velocity: Vec2 = field(default_factory=Vec2)
    acceleration: Vec2 = field(default_factory=Vec2)
    mass: int = NODE_MASS
    fixed: bool = False
    half_side_len: int = NODE_HALF_SIDE


@dataclass(eq=False)
class Spring:
    """A damped spring between two nodes."""

    node1: Node
    node2: Node
    rest_length: float
    stiffness: float
    damp_coef: float
    current_length: float = 0.0


def _check_grid(rows: int, cols: int) -> None:
    if rows < 2 or cols < 2:
        raise ValueError(f"a soft body needs at least 2 rows and 2 columns, got {rows}x{cols}")


def build_nodes(rows: int, cols: int, spacing: float, offset_x: float, offset_y: float) -> list[Node]:
    """Lay out rows*cols nodes in row-major order."""
    return [
        Node(center=Vec2(c * spacing + offset_x, r * spacing + offset_y))
        for r in range(rows)
        for c in range(cols)
    ]


def build_springs(
    rows: int,
    cols: int,
    spacing: float,
    damp_coef: float,
    stiffness: float,
    nodes: list[Node],
) -> list[Spring]:
    """Connect a node grid with structural, shear and two corner springs."""
    _check_grid(rows, cols)
    if len(nodes) != rows * cols:
        raise ValueError(f"expected {rows * cols} nodes, got {len(nodes)}")
    diagonal = math.sqrt(2 * spacing * spacing)

    def spring(a: Node, b: Node, rest: float, stiff: float = stiffness) -> Spring:
        return Spring(node1=a, node2=b, rest_length=rest, stiffness=stiff, damp_coef=damp_coef)

    springs: list[Spring] = []
    for r in range(rows):
        for c in range(cols):
            node = nodes[r * cols + c]
            if r < rows - 1:
                springs.append(spring(node, nodes[(r + 1) * cols + c], spacing))
            if c < cols - 1:
                springs.append(spring(node, nodes[r * cols + c + 1], spacing))
            if c < cols - 1 and r < rows - 1:
                springs.append(spring(node, nodes[(r + 1) * cols + c + 1], diagonal))
            if c > 0 and r < rows - 1:
                springs.append(spring(node, nodes[(r + 1) * cols + c - 1], diagonal))

    last = rows * cols - 1
    springs.append(
        spring(nodes[0], nodes[last], nodes[0].center.distance_to(nodes[last].center), stiffness * 0.5)
    )
    springs.append(
        spring(
            nodes[cols - 1],
            nodes[rows * cols - cols],
            nodes[cols].center.distance_to(nodes[last - cols].center),
            stiffness * 0.5,
        )
    )
    return springs


def edge_indexes(rows: int, cols: int) -> list[int]:
    """Indexes of the outline nodes, walking clockwise from the top-left corner."""
    _check_grid(rows, cols)
    top = [c for c in range(cols)]
    right = [r * cols + cols - 1 for r in range(1, rows - 1)]
    bottom = [(rows - 1) * cols + c for c in reversed(range(cols))]
    left = [r * cols for r in reversed(range(1, rows - 1))]
    return top + right + bottom + left


@dataclass(eq=False)
class Softbody:
    """A deformable body: nodes, springs, an outline and a bounding box."""

    nodes: list[Node]
    springs: list[Spring]
    edge_indexes: list[int]
    color: Color
    bbox_top_left: Vec2 = field(default_factory=Vec2)
    bbox_bottom_right: Vec2 = field(default_factory=Vec2)

    @classmethod
    def grid(
        cls,
        rows: int,
        cols: int,
        spacing: float,
        offset_x: float,
        offset_y: float,
        damp_coef: float,
        stiffness: float,
        color: Color,
    ) -> Softbody:
        """Build a rectangular soft body whose top-left node sits at the offset."""
        _check_grid(rows, cols)
        nodes = build_nodes(rows, cols, spacing, offset_x, offset_y)
        springs = build_springs(rows, cols, spacing, damp_coef, stiffness, nodes)
        return cls(nodes=nodes, springs=springs, edge_indexes=edge_indexes(rows, cols), color=color)

    def edge_points(self) -> list[Vec2]:
        """Centres of the outline nodes in outline order."""
        return [self.nodes[i].center for i in self.edge_indexes]

    def update_bounds(self, width: float, height: float) -> None:
        """Recompute the bounding box, starting from a box inverted over the screen."""
        left, top = float(width), float(height)
        right, bottom = 0.0, 0.0
        for node in self.nodes:
            x, y = node.center.x, node.center.y
            right = max(right, x)
            left = min(left, x)
            bottom = max(bottom, y)
            top = min(top, y)
        self.bbox_top_left = Vec2(left, top)
        self.bbox_bottom_right = Vec2(right, bottom)

    def overlaps(self, other: Softbody) -> bool:
        """Whether the two bounding boxes overlap strictly."""
        return (
            self.bbox_top_left.x < other.bbox_bottom_right.x
            and self.bbox_bottom_right.x > other.bbox_top_left.x
            and self.bbox_top_left.y < other.bbox_bottom_right.y
            and self.bbox_bottom_right.y > other.bbox_top_left.y
        )