"""End-to-end query scenarios over a LocalScene.

Why these tests exist:
- They pin the documented behaviour of whole queries, not single parts
- They exercise the default provider, steps and cache together
"""

import warnings

import pytest

from scenequery import (
    ByType,
    GraphProvider,
    LookupMissWarning,
    PreconditionViolationError,
    Query,
    TypeWhitelist,
)


def test_player_and_hud(scene, health_cls, text_cls):
    """Tag and name steps concatenate in insertion order."""
    health, label = health_cls(100), text_cls("Score: 0")
    scene.create_node("Player", health, tag="Player")
    scene.create_node("HUD", label)

    query = Query(scene).on_tag("Player", health_cls).on_name("HUD", text_cls)

    assert query.values() == [health, label]
    assert query.value() is label


def test_on_children_scenario(scene, family, armor_cls):
    assert Query(scene).on_children(family["R"]).values() == family["entities"]
    assert Query(scene).on_children(family["R"], armor_cls).values() == [family["entities"][3]]


def test_missing_name_warns_once_and_yields_nothing(scene):
    query = Query(scene).on_name("Foo")

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        values = query.values()

    assert values == []
    assert [w.category for w in caught] == [LookupMissWarning]


def test_miss_does_not_abort_other_steps(scene, family):
    query = Query(scene).on_tag("Nobody").on_node(family["C1"])

    with pytest.warns(LookupMissWarning):
        assert query.values() == family["entities"][:2]


def test_empty_whitelist_by_type_fails_at_construction(scene):
    with pytest.raises(PreconditionViolationError):
        ByType(GraphProvider(scene).find_by_type, False, TypeWhitelist())


def test_prefab_editing_context(scene, health_cls):
    """Inside an alternate root, global lookups only see that subtree."""
    in_scene, in_prefab = health_cls(1), health_cls(2)
    scene.create_node("Door", in_scene)
    prefab = scene.create_node("DoorPrefab", active=False)
    scene.create_node("Door", in_prefab, parent=prefab)

    query = Query(scene, auto_refresh=True).on_name("Door")

    assert query.values() == [in_scene]
    with scene.isolate(prefab):
        assert query.values() == [in_prefab]
    assert query.values() == [in_scene]


def test_graph_changes_visible_only_after_refresh(scene, family, health_cls):
    query = Query(scene).on_children(family["R"], health_cls)
    before = query.values()

    added = health_cls(99)
    family["C2"].attach(added)

    assert query.values() == before
    assert query.dirty().values() == [*before, added]
