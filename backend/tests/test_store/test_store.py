"""Tests for the per-round board store."""

import pytest

from warplanner.engine.board import CircularBase, SelectedModel, SpawnableUnit
from warplanner.engine.config import LayoutConfig
from warplanner.store import BoardLookupError, BoardStore, DuplicateUnitError


@pytest.fixture
def store():
    s = BoardStore(["terraform", "purge"])
    s.spawn("terraform", SpawnableUnit("boyz", "Boyz", 4, base=CircularBase(32.0)))
    s.spawn("terraform", SpawnableUnit("nob", "Nob", 1, base=CircularBase(40.0)))
    return s


def test_rounds_are_independent(store):
    assert store.rounds == ["terraform", "purge"]
    assert [g.id for g in store.groups("terraform")] == ["boyz", "nob"]
    assert store.groups("purge") == []


def test_unknown_round(store):
    with pytest.raises(BoardLookupError):
        store.groups("nowhere")


def test_duplicate_spawn(store):
    with pytest.raises(DuplicateUnitError):
        store.spawn("terraform", SpawnableUnit("boyz", "Boyz", 2))
    # Same unit in another round is fine
    store.spawn("purge", SpawnableUnit("boyz", "Boyz", 2))


def test_spawn_uses_layout_config():
    s = BoardStore(["r"], LayoutConfig(spacing_mm=0.0, spawn_x_mm=0.0, spawn_y_mm=0.0))
    g = s.spawn("r", SpawnableUnit("u", "U", 2, base=CircularBase(25.0)))
    assert (g.x, g.y) == (0.0, 0.0)
    assert g.models[1].x == 25.0


def test_move_and_rotate(store):
    store.move_group("terraform", "boyz", 500.0, 400.0)
    store.move_model("terraform", "boyz", "model-0", 10.0, 20.0)
    store.rotate_model("terraform", "boyz", "model-0", -45.0)
    g = store.group("terraform", "boyz")
    assert (g.x, g.y) == (500.0, 400.0)
    m = g.get_model("model-0")
    assert (m.x, m.y, m.rotation) == (10.0, 20.0, 315.0)


def test_unknown_group_and_model(store):
    with pytest.raises(BoardLookupError):
        store.move_group("terraform", "ghost", 0.0, 0.0)
    with pytest.raises(BoardLookupError):
        store.move_model("terraform", "boyz", "model-99", 0.0, 0.0)


def test_line_up(store):
    g = store.line_up("terraform", "boyz")
    assert [m.y for m in g.models] == [0.0] * 4
    assert [m.x for m in g.models] == [0.0, 37.0, 74.0, 111.0]


def test_delete_group_clears_its_selection(store):
    store.select_all("terraform")
    store.delete_group("terraform", "nob")
    assert [g.id for g in store.groups("terraform")] == ["boyz"]
    assert all(s.group_id == "boyz" for s in store.selection("terraform"))


def test_set_selection_drops_unknown_and_duplicates(store):
    ref = SelectedModel("boyz", "model-0")
    result = store.set_selection("terraform", [ref, ref, SelectedModel("ghost", "model-0")])
    assert result == [ref]


def test_toggle_and_clear(store):
    ref = SelectedModel("nob", "model-0")
    assert store.toggle_selection("terraform", ref) == [ref]
    assert store.toggle_selection("terraform", ref) == []
    store.select_all("terraform")
    store.clear_selection("terraform")
    assert store.selection("terraform") == []


def test_box_select_replaces_selection(store):
    store.select_all("terraform")
    # Spawn origin is (50, 50); only model-0 of each group sits at the origin
    hits = store.box_select("terraform", (40.0, 40.0, 55.0, 55.0))
    assert hits == [SelectedModel("boyz", "model-0"), SelectedModel("nob", "model-0")]


def test_delete_selected(store):
    store.set_selection(
        "terraform", [SelectedModel("boyz", "model-0"), SelectedModel("nob", "model-0")]
    )
    assert store.delete_selected("terraform") == 2
    groups = store.groups("terraform")
    assert [g.id for g in groups] == ["boyz"]
    assert len(groups[0].models) == 3
    assert store.selection("terraform") == []
    assert store.delete_selected("terraform") == 0


def test_translate_selection(store):
    store.set_selection("terraform", [SelectedModel("nob", "model-0")])
    store.translate_selection("terraform", 5.0, 5.0)
    m = store.group("terraform", "nob").get_model("model-0")
    assert (m.x, m.y) == (5.0, 5.0)
    assert store.group("terraform", "boyz").get_model("model-0").x == 0.0
