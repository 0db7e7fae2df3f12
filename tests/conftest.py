"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass

from scenequery import Entity, LocalScene


@dataclass(eq=False)
class Health(Entity):
    points: int = 100


@dataclass(eq=False)
class Armor(Entity):
    rating: int = 1


@dataclass(eq=False)
class Shield(Armor):
    """Subclass entity: assignable to Armor."""

    block: float = 0.5


@dataclass(eq=False)
class UIText(Entity):
    text: str = ""


@pytest.fixture
def scene():
    """Fresh LocalScene instance."""
    return LocalScene()


@pytest.fixture
def family(scene):
    """Root R with children C1 (Health, Health) and C2 (Health, Armor).

    Returns:
        Dict of node name to node, plus "entities" in attachment order.
    """
    root = scene.create_node("R")
    c1_a, c1_b = Health(1), Health(2)
    c2_x, c2_y = Health(3), Armor(4)
    c1 = scene.create_node("C1", c1_a, c1_b, parent=root)
    c2 = scene.create_node("C2", c2_x, c2_y, parent=root)
    return {
        "R": root,
        "C1": c1,
        "C2": c2,
        "entities": [c1_a, c1_b, c2_x, c2_y],
    }


@pytest.fixture
def health_cls():
    return Health


@pytest.fixture
def armor_cls():
    return Armor


@pytest.fixture
def shield_cls():
    return Shield


@pytest.fixture
def text_cls():
    return UIText
