import pytest

from iterations.ecs import NULL_ENTITY, ComponentStore, System, World


class Position:
    def __init__(self, x=0):
        self.x = x


class Velocity:
    def __init__(self, dx=0):
        self.dx = dx


class Tag:
    pass


class Recorder(System):
    def __init__(self, name, log):
        self.name = name
        self.log = log

    def update(self, world, delta_time):
        self.log.append((self.name, delta_time))


def test_entities_start_after_null_and_increase():
    world = World()
    first = world.create_entity()
    second = world.create_entity()
    assert NULL_ENTITY == 0
    assert first == 1
    assert second == first + 1


def test_store_add_get_replace():
    store = ComponentStore()
    store.add(1, "a")
    store.add(1, "b")
    assert store.get(1) == "b"
    assert store.has(1)
    assert len(store) == 1


def test_store_get_missing_raises():
    store = ComponentStore()
    with pytest.raises(KeyError):
        store.get(5)


def test_store_try_get_and_remove():
    store = ComponentStore()
    store.add(2, "x")
    assert store.try_get(2) == "x"
    store.remove(2)
    store.remove(2)
    assert store.try_get(2) is None
    assert not store.has(2)


def test_store_items_order():
    store = ComponentStore()
    store.add(3, "c")
    store.add(1, "a")
    assert list(store.items()) == [(3, "c"), (1, "a")]


def test_world_component_round_trip():
    world = World()
    e = world.create_entity()
    pos = Position(4)
    world.add_component(e, pos)
    assert world.has_component(e, Position)
    assert world.get_component(e, Position) is pos
    assert world.get_store(Position).get(e) is pos
    world.remove_component(e, Position)
    assert not world.has_component(e, Position)


def test_get_component_missing_raises():
    world = World()
    e = world.create_entity()
    with pytest.raises(KeyError):
        world.get_component(e, Position)


def test_view_filters_by_all_types():
    world = World()
    a, b, c = (world.create_entity() for _ in range(3))
    for e in (a, b, c):
        world.add_component(e, Position())
    world.add_component(a, Velocity())
    world.add_component(c, Velocity())
    assert world.view(Position, Velocity) == [a, c]
    assert world.view(Position) == [a, b, c]


def test_view_missing_store_is_empty():
    world = World()
    e = world.create_entity()
    world.add_component(e, Position())
    assert world.view(Tag) == []
    assert world.view(Position, Tag) == []


def test_destroy_entity_removes_all_components():
    world = World()
    e = world.create_entity()
    other = world.create_entity()
    world.add_component(e, Position())
    world.add_component(e, Velocity())
    world.add_component(other, Position())
    world.destroy_entity(e)
    assert not world.has_component(e, Position)
    assert not world.has_component(e, Velocity)
    assert world.view(Position) == [other]


def test_systems_run_in_order_and_separately():
    world = World()
    log = []
    world.add_update_system(Recorder("move", log))
    world.add_update_system(Recorder("collide", log))
    world.add_render_system(Recorder("draw", log))
    world.update_systems(0.5)
    assert log == [("move", 0.5), ("collide", 0.5)]
    log.clear()
    world.render_systems(0.0)
    assert log == [("draw", 0.0)]


def test_system_is_abstract():
    with pytest.raises(TypeError):
        System()