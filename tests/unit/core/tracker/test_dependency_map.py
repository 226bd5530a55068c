from __future__ import annotations

"""
Unit tests for the reverse dependency map.

Verifies edge insertion, dependent removal with pruning of empty entries,
and ordering guarantees.
"""

from importtracker.core.tracker.graph import DependencyMap


def test_add_edge_keeps_insertion_order_without_duplicates():
    graph = DependencyMap()
    graph.add_edge("b", "a")
    graph.add_edge("b", "c")
    graph.add_edge("b", "a")

    assert graph.dependents_of("b") == ["a", "c"]
    assert "b" in graph
    assert len(graph) == 1


def test_remove_dependent_prunes_empty_entries():
    graph = DependencyMap()
    graph.add_edge("x", "a")
    graph.add_edge("y", "a")
    graph.add_edge("y", "b")

    removed = graph.remove_dependent("a")

    assert removed == 2
    assert "x" not in graph
    assert graph.to_dict() == {"y": ["b"]}


def test_remove_unknown_dependent_is_noop():
    graph = DependencyMap()
    graph.add_edge("x", "a")
    assert graph.remove_dependent("zzz") == 0
    assert graph.to_dict() == {"x": ["a"]}


def test_dependencies_of_lists_forward_imports():
    graph = DependencyMap()
    graph.add_edge("x", "a")
    graph.add_edge("y", "a")
    graph.add_edge("y", "b")

    assert graph.dependencies_of("a") == ["x", "y"]
    assert graph.dependencies_of("b") == ["y"]


def test_returned_lists_are_copies():
    graph = DependencyMap()
    graph.add_edge("x", "a")
    graph.dependents_of("x").append("intruder")
    graph.to_dict()["x"].append("intruder")

    assert graph.dependents_of("x") == ["a"]
    assert dict(graph.items()) == {"x": ["a"]}


def test_empty_map_is_falsy():
    assert not DependencyMap()
