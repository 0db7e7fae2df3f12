"""Tests for the Node and Entity data model."""

import gc
from dataclasses import dataclass

import pytest

from scenequery import Entity, Node


@dataclass
class Score(Entity):
    """Compares by value, so identity matters when detaching."""

    value: int = 0


def test_attach_sets_owner_and_order():
    node = Node("Player")
    first, second = Score(1), Score(2)

    node.attach(first)
    node.attach(second)

    assert node.entities == (first, second)
    assert first.node is node


def test_attach_moves_entity_between_nodes():
    a, b = Node("A"), Node("B")
    score = a.attach(Score())

    b.attach(score)

    assert a.entities == ()
    assert b.entities[0] is score
    assert score.node is b


def test_detach_uses_identity_not_equality():
    """Two equal dataclass entities: detaching one keeps the other."""
    node = Node("N")
    first, second = Score(5), Score(5)
    node.attach(first)
    node.attach(second)

    assert node.detach(second)

    assert len(node.entities) == 1
    assert node.entities[0] is first
    assert second.node is None
    assert first.node is node


def test_detach_unknown_entity_returns_false():
    assert not Node("N").detach(Score())


def test_entity_owner_reference_is_weak():
    node = Node("Temp")
    score = node.attach(Score())

    del node
    gc.collect()

    assert score.node is None


def test_plain_entity_starts_detached():
    assert Entity().node is None


def test_add_child_reparents():
    old, new, child = Node("Old"), Node("New"), Node("Child")
    old.add_child(child)

    new.add_child(child)

    assert old.children == ()
    assert new.children == (child,)
    assert child.parent is new


def test_add_child_rejects_cycles():
    root, child = Node("Root"), Node("Child")
    root.add_child(child)

    with pytest.raises(ValueError):
        child.add_child(root)
    with pytest.raises(ValueError):
        root.add_child(root)


def test_remove_child_clears_parent():
    root, child = Node("Root"), Node("Child")
    root.add_child(child)

    root.remove_child(child)

    assert root.children == ()
    assert child.parent is None


def test_active_in_hierarchy_follows_ancestors():
    root, mid, leaf = Node("Root"), Node("Mid"), Node("Leaf")
    root.add_child(mid).add_child(leaf)

    assert leaf.active_in_hierarchy

    root.active = False

    assert not leaf.active_in_hierarchy
    assert leaf.active


def test_iter_subtree_is_preorder():
    root, a, b, a1 = Node("Root"), Node("A"), Node("B"), Node("A1")
    root.add_child(a)
    root.add_child(b)
    a.add_child(a1)

    assert [n.name for n in root.iter_subtree()] == ["Root", "A", "A1", "B"]
