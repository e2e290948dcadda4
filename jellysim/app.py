"""Interactive window that runs and draws the simulation."""

from __future__ import annotations

import argparse

import pygame

from jellysim.physics import FLOOR
from jellysim.world import World, default_world

BACKGROUND = (0, 0, 0)
FLOOR_COLOR = (200, 200, 200)
FRAME_DELAY_MS = 10


def draw(surface: pygame.Surface, world: World) -> None:
    """Clear the surface and draw each body's outline and the floor."""
    surface.fill(BACKGROUND)
    for body in world.bodies:
        points = [(p.x, p.y) for p in body.edge_points()]
        color = (body.color.r, body.color.g, body.color.b)
        pygame.draw.lines(surface, color, True, points)
    pygame.draw.line(surface, FLOOR_COLOR, (0, FLOOR), (world.width, FLOOR))


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="jellysim", description="Soft-body physics demo.")
    parser.add_argument(
        "--frames",
        type=_positive_int,
        default=None,
        help="stop after this many frames (default: run until the window is closed)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Open a window and run the simulation until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            world = default_world()
            screen = pygame.display.set_mode((int(world.width), int(world.height)))
        except pygame.error:
            print("SDL INIT FAILED")
            return 1
        pygame.display.set_caption("jellysim")

        frame = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            world.step()
            draw(screen, world)
            pygame.display.flip()
            pygame.time.delay(FRAME_DELAY_MS)
            frame += 1
            if args.frames is not None and frame >= args.frames:
                running = False
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())