"""Tests for the in-memory LocalScene host graph.

Why these tests exist:
- LocalScene is the reference SceneGraph used by every other test
- Alternate-root scoping must confine scene-wide lookups
- Inactive handling must match the traversal rules providers rely on
"""

import pytest

from scenequery import LocalScene, Node, QuerySettings, SceneGraph


@pytest.fixture
def level(scene):
    """Level -> (Player[tag Player], Hidden[inactive] -> HiddenChild), Prefab -> Part."""
    level = scene.create_node("Level")
    player = scene.create_node("Player", tag="Player", parent=level)
    hidden = scene.create_node("Hidden", tag="Player", active=False, parent=level)
    hidden_child = scene.create_node("HiddenChild", parent=hidden)
    prefab = scene.create_node("Prefab")
    part = scene.create_node("Part", tag="Player", parent=prefab)
    return {
        "Level": level,
        "Player": player,
        "Hidden": hidden,
        "HiddenChild": hidden_child,
        "Prefab": prefab,
        "Part": part,
    }


def test_local_scene_is_scene_graph(scene):
    assert isinstance(scene, SceneGraph)


def test_create_node_uses_default_tag_from_settings():
    scene = LocalScene(QuerySettings(default_tag="Prop"))

    node = scene.create_node("Crate")

    assert node.tag == "Prop"
    assert scene.roots == (node,)


def test_add_root_detaches_from_parent(scene):
    parent = scene.create_node("Parent")
    child = scene.create_node("Child", parent=parent)

    scene.add_root(child)

    assert child.parent is None
    assert scene.roots == (parent, child)


def test_remove_root(scene):
    node = scene.create_node("Gone")

    assert scene.remove_root(node)
    assert not scene.remove_root(node)
    assert scene.roots == ()


def test_find_by_name_skips_inactive(scene, level):
    assert scene.find_node_by_name("Player") is level["Player"]
    assert scene.find_node_by_name("HiddenChild") is None
    assert scene.find_node_by_name("player") is None


def test_find_by_tag_in_scene_order(scene, level):
    assert scene.find_nodes_by_tag("Player") == [level["Player"], level["Part"]]


def test_scoped_lookups_include_inactive(scene, level):
    assert scene.find_node_by_name("HiddenChild", level["Hidden"]) is level["HiddenChild"]
    assert scene.find_nodes_by_tag("Player", level["Level"]) == [level["Player"], level["Hidden"]]


def test_enumerate_all_nodes(scene, level):
    active = [n.name for n in scene.enumerate_all_nodes(False)]
    everything = [n.name for n in scene.enumerate_all_nodes(True)]

    assert active == ["Level", "Player", "Prefab", "Part"]
    assert everything == ["Level", "Player", "Hidden", "HiddenChild", "Prefab", "Part"]


def test_enumerate_all_nodes_in_scope(scene, level):
    assert [n.name for n in scene.enumerate_all_nodes(False, level["Prefab"])] == ["Prefab", "Part"]


def test_isolate_sets_and_restores_alternate_root(scene, level):
    assert scene.current_alternate_root() is None

    with scene.isolate(level["Prefab"]) as root:
        assert root is level["Prefab"]
        with scene.isolate(level["Hidden"]):
            assert scene.current_alternate_root() is level["Hidden"]
        assert scene.current_alternate_root() is level["Prefab"]

    assert scene.current_alternate_root() is None


def test_isolate_restores_on_error(scene, level):
    with pytest.raises(RuntimeError):
        with scene.isolate(level["Prefab"]):
            raise RuntimeError("boom")

    assert scene.current_alternate_root() is None


def test_ancestors_nearest_first(scene, level):
    assert scene.ancestors_of(level["HiddenChild"]) == [level["Hidden"], level["Level"]]


def test_descendants_prune_inactive_subtrees(scene, level):
    assert scene.descendants_of(level["Level"], False) == [level["Player"]]
    assert scene.descendants_of(level["Level"], True) == [
        level["Player"],
        level["Hidden"],
        level["HiddenChild"],
    ]


def test_entities_of_returns_copy(scene, health_cls):
    node = scene.create_node("N", health_cls())

    entities = scene.entities_of(node)
    entities.clear()

    assert len(node.entities) == 1


def test_node_constructor_default_tag():
    assert Node("Bare").tag == "Untagged"
