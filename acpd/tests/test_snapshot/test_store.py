"""Tests for snapshot models and SnapshotStore loading."""

import json

import pytest
from pydantic import ValidationError

from acpd.core.exceptions import SnapshotLoadError
from acpd.core.snapshot import Snapshot, SnapshotStore


class TestSnapshotModels:

    def test_parses_sample(self, snapshot):
        assert len(snapshot.files) == 4
        assert snapshot.symbols["createSession"].constraints.level == "frozen"
        assert snapshot.symbols["destroySession"].constraints is None
        assert snapshot.graph.reverse["getPool"] == ["createSession"]

    def test_type_alias(self, snapshot):
        symbol = snapshot.symbols["PoolConfig"]
        assert symbol.symbol_type == "class"
        assert symbol.model_dump(by_alias=True)["type"] == "class"

    def test_unknown_fields_preserved(self, snapshot):
        dumped = snapshot.files["src/auth/session.ts"].model_dump()
        assert dumped["git"] == {"last_author": "dev"}

    def test_frozen(self, snapshot):
        with pytest.raises(ValidationError):
            snapshot.stats.files = 99

    def test_minimal_snapshot(self):
        snapshot = Snapshot.model_validate({})
        assert snapshot.symbols == {}
        assert snapshot.graph is None
        assert snapshot.constraints is None


class TestSnapshotStore:

    def test_from_project(self, project_dir):
        store = SnapshotStore.from_project(project_dir)
        assert store.project_root == project_dir
        assert len(store.snapshot.symbols) == 4
        assert "SYM_AUTH" in store.vars.variables

    def test_same_reference_each_time(self, project_dir):
        store = SnapshotStore.from_project(project_dir)
        assert store.snapshot is store.snapshot

    def test_snapshot_not_replaceable(self, project_dir, snapshot):
        store = SnapshotStore.from_project(project_dir)
        loaded = store.snapshot
        with pytest.raises(AttributeError):
            store.snapshot = snapshot
        assert store.snapshot is loaded

    def test_vars_optional(self, project_dir):
        (project_dir / ".acp" / "acp.vars.json").unlink()
        store = SnapshotStore.from_project(project_dir)
        assert store.vars is None

    def test_missing_cache(self, tmp_path):
        with pytest.raises(SnapshotLoadError, match="No snapshot"):
            SnapshotStore.from_project(tmp_path)

    def test_invalid_json(self, project_dir):
        (project_dir / ".acp" / "acp.cache.json").write_text("{not json")
        with pytest.raises(SnapshotLoadError, match="Invalid JSON"):
            SnapshotStore.from_project(project_dir)

    def test_schema_mismatch(self, project_dir, sample_cache):
        sample_cache["symbols"]["broken"] = {"file": "x.py"}
        (project_dir / ".acp" / "acp.cache.json").write_text(json.dumps(sample_cache))
        with pytest.raises(SnapshotLoadError, match="Snapshot schema"):
            SnapshotStore.from_project(project_dir)
