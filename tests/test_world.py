from jellysim.body import Color, Softbody
from jellysim.physics import DAMP_COEF, FLOOR, SCREEN_HEIGHT, SCREEN_WIDTH, STIFFNESS
from jellysim.world import World, default_world

RED = Color(255, 0, 0)


def _square(spacing=20, offset_x=100, offset_y=100):
    return Softbody.grid(2, 2, spacing, offset_x, offset_y, DAMP_COEF, STIFFNESS, RED)


def test_default_world_layout():
    world = default_world()
    assert len(world.bodies) == 6
    assert [b.color for b in world.bodies] == [
        Color(255, 255, 100),
        Color(255, 100, 255),
        Color(255, 100, 100),
        Color(100, 255, 255),
        Color(100, 255, 100),
        Color(100, 100, 255),
    ]
    assert all(len(b.nodes) == 100 for b in world.bodies)
    assert world.bodies[0].nodes[0].center.x == 50
    assert world.bodies[0].nodes[0].center.y == 600
    assert world.width == SCREEN_WIDTH
    assert world.height == SCREEN_HEIGHT


def test_add_appends_body():
    world = World()
    body = _square()
    world.add(body)
    assert world.bodies == [body]


def test_step_falls_under_gravity():
    world = World()
    body = _square()
    world.add(body)
    before = [n.center for n in body.nodes]
    world.step()
    for old, node in zip(before, body.nodes):
        assert node.center.y > old.y
        assert abs(node.center.x - old.x) < 1e-9


def test_step_updates_bounds_to_node_extent():
    world = World()
    body = _square()
    world.add(body)
    world.step()
    xs = [n.center.x for n in body.nodes]
    ys = [n.center.y for n in body.nodes]
    assert body.bbox_top_left.x == min(xs)
    assert body.bbox_top_left.y == min(ys)
    assert body.bbox_bottom_right.x == max(xs)
    assert body.bbox_bottom_right.y == max(ys)


def test_fixed_nodes_do_not_move():
    world = World()
    body = _square()
    for node in body.nodes:
        node.fixed = True
    world.add(body)
    before = [n.center for n in body.nodes]
    world.step()
    assert [n.center for n in body.nodes] == before


def test_close_nodes_repel_each_other():
    world = World()
    body = _square(spacing=1)
    world.add(body)
    world.step()
    assert body.nodes[0].center.distance_to(body.nodes[1].center) > 1


def test_nodes_never_sink_below_floor():
    world = World()
    world.add(_square(offset_y=FLOOR - 25))
    for _ in range(200):
        world.step()
    assert all(n.center.y <= FLOOR for b in world.bodies for n in b.nodes)


def test_default_world_step_keeps_structure():
    world = default_world()
    world.step()
    for body in world.bodies:
        assert len(body.nodes) == 100
        assert body.bbox_top_left.x <= body.bbox_bottom_right.x
        assert body.bbox_top_left.y <= body.bbox_bottom_right.y