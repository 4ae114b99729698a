from __future__ import annotations

import pytest

from compound_interest.core.errors import HistoryItemNotFound
from compound_interest.core.history import HistoryStore


def test_most_recent_first_and_capped():
    store = HistoryStore(max_items=3)
    saved = [store.save("compound", {"principal": i}, result=i, name=f"run {i}") for i in range(5)]

    items = store.list()
    assert len(store) == 3
    assert [item.name for item in items] == ["run 4", "run 3", "run 2"]
    assert items[0].id == saved[-1].id


def test_blank_name_uses_scenario_label():
    store = HistoryStore()

    compound = store.save("compound", {}, result=1, name="   ")
    accumulation = store.save("accumulation", {}, result=2)

    assert compound.name == "Lump-sum calculation"
    assert accumulation.name == "Accumulation calculation"


def test_state_is_snapshotted():
    store = HistoryStore()
    state = {"principal": 1_000_000, "fx": {"enabled": False}}

    item = store.save("compound", state, result=1_628_895)
    state["principal"] = 0

    assert store.get(item.id).state["principal"] == 1_000_000


def test_get_and_delete():
    store = HistoryStore()
    item = store.save("accumulation", {"installment": 30_000}, result=8_000_000)

    assert store.get(item.id) == item
    assert store.delete(item.id) is True
    assert store.delete(item.id) is False
    with pytest.raises(HistoryItemNotFound):
        store.get(item.id)


def test_file_round_trip(tmp_path):
    path = tmp_path / "history.json"
    store = HistoryStore(max_items=5, path=path)
    item = store.save("compound", {"rate": 5}, result=1_628_895, name="baseline")

    reloaded = HistoryStore(max_items=5, path=path)
    assert reloaded.list() == [item]


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "history.json"
    path.write_text("{not json")

    store = HistoryStore(path=path)
    assert store.list() == []

    store.save("compound", {}, result=1)
    assert len(HistoryStore(path=path)) == 1


def test_invalid_cap_rejected():
    with pytest.raises(ValueError):
        HistoryStore(max_items=0)


def test_failed_write_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "history.json"
    store = HistoryStore(path=path)
    first = store.save("compound", {"rate": 5}, result=1_628_895)

    def broken_replace(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("compound_interest.core.history.os.replace", broken_replace)
    with pytest.raises(OSError):
        store.save("compound", {"rate": 6}, result=1_790_848)
    monkeypatch.undo()

    assert HistoryStore(path=path).list() == [first]
    assert sorted(p.name for p in tmp_path.iterdir()) == ["history.json"]
