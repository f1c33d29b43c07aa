#!/usr/bin/env python3
"""Unit tests for the layout engine.

Tests the recursive positioning of the visible tree:
- Ring placement of the root's entries
- Centred rows below expanded directories
- Edge control points
- Bounding box accumulation
- Containment of unreadable subtrees
"""

import math
import sys
from pathlib import Path

# Add src and this directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent))

import pytest

from fakes import FakeProvider, FixedWidthMeasurer, entry
from fsmap.errors import AccessError, LayoutError
from fsmap.layout.engine import LayoutConfig, LayoutEngine
from fsmap.model.expansion import ExpansionState


ROOT = "/home/user"


def make_tree() -> dict:
    return {
        ROOT: [
            entry(ROOT, "A", is_directory=True),
            entry(ROOT, "B"),
            entry(ROOT, "C", is_directory=True),
        ],
        f"{ROOT}/A": [entry(f"{ROOT}/A", "D")],
        f"{ROOT}/C": [entry(f"{ROOT}/C", "E"), entry(f"{ROOT}/C", "F", is_directory=True)],
        f"{ROOT}/C/F": [],
    }


def make_engine(tree: dict | None = None, denied: set[str] | None = None, **config) -> LayoutEngine:
    provider = FakeProvider(tree if tree is not None else make_tree(), denied)
    return LayoutEngine(provider, config=LayoutConfig(**config), measurer=FixedWidthMeasurer())


def angle_of(node, origin=(0.0, 0.0)) -> float:
    return math.atan2(node.y - origin[1], node.x - origin[0]) % (2 * math.pi)


def test_ring_of_collapsed_root():
    """Root entries sit on the ring at even angles, one edge each."""
    engine = make_engine()
    result = engine.layout(ROOT)

    assert [n.entry.name for n in result.nodes] == ["A", "B", "C"]
    assert len(result.edges) == 3
    assert all(n.depth == 0 for n in result.nodes)

    radius = engine.config.ring_radius
    assert radius == 250.0 * 20
    for i, node in enumerate(result.nodes):
        assert math.hypot(node.x, node.y) == pytest.approx(radius)
        assert angle_of(node) == pytest.approx(2 * math.pi * i / 3)

    for edge in result.edges:
        assert (edge.x1, edge.y1) == (0.0, 0.0)

    print("✓ Ring layout test passed")


def test_first_ring_entry_at_angle_zero():
    engine = make_engine()
    result = engine.layout(ROOT, 100.0, -50.0)

    first = result.nodes[0]
    assert first.x == pytest.approx(100.0 + engine.config.ring_radius)
    assert first.y == pytest.approx(-50.0)
    assert first.parent_position == (100.0, -50.0)


def test_expanding_directory_adds_centred_child():
    """Expanding A draws its only child D centred below A."""
    engine = make_engine()
    expansion = ExpansionState()
    expansion.toggle(f"{ROOT}/A")

    result = engine.layout(ROOT, expansion=expansion)

    assert len(result.nodes) == 4
    ring = [n for n in result.nodes if n.depth == 0]
    rows = [n for n in result.nodes if n.depth == 1]
    assert len(ring) == 3
    assert [n.entry.name for n in rows] == ["D"]

    a = result.node_for(f"{ROOT}/A")
    d = rows[0]
    assert d.x == pytest.approx(a.x)
    assert d.y == pytest.approx(a.y + 250.0 * 20 + 100.0)
    assert d.parent_position == (a.x, a.y)

    assert result.bounds.min_x <= d.min_x
    assert result.bounds.max_x >= d.max_x
    assert result.bounds.max_y >= d.max_y

    print("✓ Expansion test passed")


def test_collapsed_result_excludes_children():
    engine = make_engine()
    result = engine.layout(ROOT)
    assert result.node_for(f"{ROOT}/A/D") is None


def test_row_spacing_and_centring():
    """Neighbouring centres are half widths plus the gap apart, centred on the parent."""
    parent = f"{ROOT}/A"
    tree = {
        ROOT: [entry(ROOT, "A", is_directory=True)],
        parent: [
            entry(parent, "x"),
            entry(parent, "a-much-longer-file-name.txt"),
            entry(parent, "medium_name.py"),
            entry(parent, "z" * 40),
        ],
    }
    engine = make_engine(tree)
    expansion = ExpansionState({parent: True})
    result = engine.layout(ROOT, expansion=expansion)

    a = result.node_for(parent)
    row = [n for n in result.nodes if n.depth == 1]
    assert len(row) == 4

    gap = engine.config.sibling_gap
    assert gap == 150.0 * 20
    for left, right in zip(row, row[1:]):
        assert right.x - left.x == pytest.approx(left.width / 2 + gap + right.width / 2)

    left_space = a.x - row[0].min_x
    right_space = row[-1].max_x - a.x
    assert left_space == pytest.approx(right_space)

    # Widths come from the sizer, so short names share the minimum width
    assert row[0].width == engine.config.min_node_width
    assert row[3].width > engine.config.min_node_width

    print("✓ Row spacing test passed")


def test_nested_rows_recurse_from_child_position():
    expansion = ExpansionState({f"{ROOT}/C": True, f"{ROOT}/C/F": True})
    tree = make_tree()
    tree[f"{ROOT}/C/F"] = [entry(f"{ROOT}/C/F", "G")]
    engine = make_engine(tree)

    result = engine.layout(ROOT, expansion=expansion)

    f = result.node_for(f"{ROOT}/C/F")
    g = result.node_for(f"{ROOT}/C/F/G")
    assert f.depth == 1
    assert g.depth == 2
    assert g.x == pytest.approx(f.x)
    assert g.y == pytest.approx(f.y + engine.config.row_drop)


def test_edge_control_point_droops_by_constant():
    engine = make_engine()
    result = engine.layout(ROOT)

    for edge in result.edges:
        cx, cy = edge.control_point
        assert cx == pytest.approx((edge.x1 + edge.x2) / 2)
        assert cy == pytest.approx((edge.y1 + edge.y2) / 2 - 250.0)


def test_hidden_entries_filtered_at_every_depth():
    parent = f"{ROOT}/A"
    tree = {
        ROOT: [entry(ROOT, ".cache", is_directory=True), entry(ROOT, "A", is_directory=True), entry(ROOT, ".bashrc")],
        parent: [entry(parent, ".git", is_directory=True), entry(parent, "main.py")],
    }
    engine = make_engine(tree)
    result = engine.layout(ROOT, expansion=ExpansionState({parent: True}))

    assert [n.entry.name for n in result.nodes] == ["A", "main.py"]
    # The only visible root entry takes index 0 of 1
    assert angle_of(result.nodes[0]) == pytest.approx(0.0)

    shown = make_engine(tree, show_hidden=True).layout(ROOT, expansion=ExpansionState({parent: True}))
    assert len([n for n in shown.nodes if n.depth == 0]) == 3
    assert len([n for n in shown.nodes if n.depth == 1]) == 2


def test_expanded_file_is_not_descended():
    engine = make_engine()
    expansion = ExpansionState({f"{ROOT}/B": True})
    result = engine.layout(ROOT, expansion=expansion)

    assert len(result.nodes) == 3
    assert f"{ROOT}/B" not in engine.provider.calls


def test_unreadable_subtree_is_left_out():
    """A failing listing drops only that subtree."""
    engine = make_engine(denied={f"{ROOT}/C"})
    expansion = ExpansionState({f"{ROOT}/A": True, f"{ROOT}/C": True})

    result = engine.layout(ROOT, expansion=expansion)

    names = [n.entry.name for n in result.nodes]
    assert names == ["A", "D", "B", "C"]
    assert len(result.edges) == 4
    assert len(result.failures) == 1
    assert isinstance(result.failures[0], AccessError)
    assert str(result.failures[0].path) == f"{ROOT}/C"

    print("✓ Unreadable subtree test passed")


def test_unreadable_root_gives_empty_result():
    engine = make_engine(tree={})
    result = engine.layout(ROOT, 10.0, 20.0)

    assert result.nodes == []
    assert result.edges == []
    assert len(result.failures) == 1
    assert (result.bounds.min_x, result.bounds.max_x) == (-90.0, 110.0)
    assert (result.bounds.min_y, result.bounds.max_y) == (-80.0, 120.0)


def test_bounds_cover_ring_and_origin_with_margin():
    engine = make_engine()
    result = engine.layout(ROOT)

    margin = engine.config.bounds_margin
    min_x = min(n.min_x for n in result.nodes)
    max_x = max(n.max_x for n in result.nodes)
    min_y = min(n.min_y for n in result.nodes)
    max_y = max(n.max_y for n in result.nodes)

    assert result.bounds.min_x == pytest.approx(min(min_x, 0.0) - margin)
    assert result.bounds.max_x == pytest.approx(max(max_x, 0.0) + margin)
    assert result.bounds.min_y == pytest.approx(min(min_y, 0.0) - margin)
    assert result.bounds.max_y == pytest.approx(max(max_y, 0.0) + margin)


def test_passes_do_not_share_bounds():
    """A small pass after a large one gets bounds of its own tree only."""
    engine = make_engine()
    big = engine.layout(ROOT, expansion=ExpansionState({f"{ROOT}/A": True, f"{ROOT}/C": True}))
    small = engine.layout(ROOT)

    assert small.bounds.max_y < big.bounds.max_y
    assert engine.layout(ROOT).bounds == small.bounds


def test_layout_is_idempotent():
    engine = make_engine()
    expansion = ExpansionState({f"{ROOT}/A": True, f"{ROOT}/C": True})

    first = engine.layout(ROOT, expansion=expansion)
    second = engine.layout(ROOT, expansion=expansion)

    assert first.nodes == second.nodes
    assert first.edges == second.edges
    assert first.bounds == second.bounds


def test_max_depth_stops_descent():
    tree = make_tree()
    tree[f"{ROOT}/C/F"] = [entry(f"{ROOT}/C/F", "G")]
    expansion = ExpansionState({f"{ROOT}/C": True, f"{ROOT}/C/F": True})

    result = make_engine(tree, max_depth=1).layout(ROOT, expansion=expansion)
    assert max(n.depth for n in result.nodes) == 1
    assert result.node_for(f"{ROOT}/C/F/G") is None

    flat = make_engine(tree, max_depth=0).layout(ROOT, expansion=expansion)
    assert len(flat.nodes) == 3


def test_node_at_hit_testing():
    engine = make_engine()
    result = engine.layout(ROOT)
    b = result.nodes[1]

    assert result.node_at(b.x, b.y) is b
    assert result.node_at(0.0, 0.0) is None


def test_to_dict_is_plain_data():
    engine = make_engine()
    data = engine.layout(ROOT, expansion=ExpansionState({f"{ROOT}/A": True})).to_dict()

    assert data["root"] == ROOT
    assert len(data["nodes"]) == 4
    assert data["nodes"][0]["name"] == "A"
    assert data["nodes"][0]["is_directory"] is True
    assert len(data["edges"]) == 4
    assert set(data["bounds"]) == {"min_x", "max_x", "min_y", "max_y"}


def test_invalid_config_rejected():
    with pytest.raises(LayoutError):
        LayoutConfig(vertical_spacing=0)
    with pytest.raises(LayoutError):
        LayoutConfig(max_depth=-1)

    assert LayoutConfig(vertical_spacing=10).edge_droop == 10


def run_all_tests():
    """Run all layout engine tests."""
    print("=== Running Layout Engine Tests ===\n")

    test_ring_of_collapsed_root()
    test_expanding_directory_adds_centred_child()
    test_row_spacing_and_centring()
    test_unreadable_subtree_is_left_out()

    print("\n=== All Layout Engine Tests Passed! ===")


if __name__ == "__main__":
    run_all_tests()
