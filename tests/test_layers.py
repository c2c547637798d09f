import pytest

from orbitengine.layers import Layer, LayerStack


@pytest.fixture
def named():
    return {n: Layer(n) for n in ("a", "b", "c", "o", "d")}


def test_layer_default_name():
    assert Layer().name == "Layer"


def test_layer_custom_name():
    assert Layer("Test Layer").name == "Test Layer"


def test_pushed_layers_go_in_front(named):
    stack = LayerStack()
    for n in ("a", "b", "c"):
        stack.push_layer(named[n])
    assert list(stack) == [named["c"], named["b"], named["a"]]
    assert len(stack) == 3


def test_overlays_come_after_layers(named):
    stack = LayerStack()
    stack.push_layer(named["a"])
    stack.push_overlay(named["o"])
    stack.push_layer(named["d"])
    assert list(stack) == [named["d"], named["a"], named["o"]]


def test_reversed_iteration(named):
    stack = LayerStack()
    stack.push_layer(named["a"])
    stack.push_layer(named["b"])
    stack.push_overlay(named["o"])
    assert list(reversed(stack)) == list(stack)[::-1]


def test_pop_layer_and_overlay(named):
    stack = LayerStack()
    stack.push_layer(named["a"])
    stack.push_layer(named["b"])
    stack.push_overlay(named["o"])
    stack.pop_layer(named["a"])
    stack.pop_overlay(named["o"])
    assert list(stack) == [named["b"]]
    assert named["a"] not in stack


def test_pop_missing_is_ignored(named):
    stack = LayerStack()
    stack.push_layer(named["a"])
    stack.pop_layer(named["b"])
    stack.pop_overlay(named["o"])
    assert list(stack) == [named["a"]]


def test_iteration_survives_mutation(named):
    stack = LayerStack()
    stack.push_layer(named["a"])
    stack.push_layer(named["b"])
    visited = []
    for layer in stack:
        visited.append(layer)
        stack.push_overlay(named["o"])
    assert visited == [named["b"], named["a"]]
    assert len(stack) == 4