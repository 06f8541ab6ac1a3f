"""Shared fixtures: a small snapshot and a project directory holding it."""

import copy
import json

import pytest

from acpd.core.snapshot import Snapshot, VarsFile

SAMPLE_CACHE = {
    "version": "1.0.0",
    "generated_at": "2026-01-05T10:00:00Z",
    "project": {"name": "shop"},
    "stats": {"files": 4, "symbols": 4, "lines": 620, "annotation_coverage": 0.75},
    "files": {
        "src/auth/session.ts": {
            "path": "src/auth/session.ts",
            "language": "typescript",
            "lines": 200,
            "domains": ["auth"],
            "layer": "service",
            "exports": ["createSession", "destroySession"],
            "imports": ["src/db/pool.ts"],
            "purpose": "Session lifecycle",
            "git": {"last_author": "dev"},
        },
        "src/payments/processor.ts": {
            "path": "src/payments/processor.ts",
            "language": "typescript",
            "lines": 300,
            "domains": ["payments", "billing-core"],
            "layer": "service",
            "exports": ["charge"],
        },
        "src/db/pool.ts": {
            "path": "src/db/pool.ts",
            "language": "typescript",
            "lines": 80,
            "domains": ["infra"],
            "layer": "data",
            "exports": ["getPool"],
        },
        "scripts/seed.py": {
            "path": "scripts/seed.py",
            "language": "python",
            "lines": 40,
            "domains": [],
            "exports": [],
        },
    },
    "symbols": {
        "createSession": {
            "name": "createSession",
            "qualified_name": "src/auth/session.ts:createSession",
            "type": "function",
            "file": "src/auth/session.ts",
            "lines": [10, 40],
            "exported": True,
            "constraints": {"level": "frozen", "directive": "Core auth logic; security-critical"},
        },
        "destroySession": {
            "name": "destroySession",
            "type": "function",
            "file": "src/auth/session.ts",
            "lines": [42, 60],
            "exported": True,
        },
        "charge": {
            "name": "charge",
            "type": "Function",
            "file": "src/payments/processor.ts",
            "exported": True,
            "constraints": {"level": "restricted", "directive": "Ask before touching payment flows"},
        },
        "PoolConfig": {
            "name": "PoolConfig",
            "type": "class",
            "file": "src/db/pool.ts",
            "exported": False,
        },
    },
    "graph": {
        "forward": {"createSession": ["getPool"], "charge": ["createSession"]},
        "reverse": {"getPool": ["createSession"], "createSession": ["charge"]},
    },
    "domains": {
        "auth": {"name": "auth", "files": ["src/auth/session.ts"], "symbols": ["createSession"]},
        "payments": {"name": "payments", "files": ["src/payments/processor.ts"], "description": "Money"},
    },
    "constraints": {
        "by_file": {
            "src/auth/session.ts": {"level": "frozen", "directive": "Core auth logic"},
            "src/payments/processor.ts": {"level": "restricted", "directive": "Ask first"},
        },
        "by_lock_level": {
            "frozen": ["src/auth/session.ts"],
            "restricted": ["src/payments/processor.ts"],
        },
    },
}

SAMPLE_VARS = {
    "version": "1.0.0",
    "variables": {
        "SYM_AUTH": {
            "type": "symbol",
            "value": "src/auth/session.ts:createSession",
            "description": "Session factory",
            "source": "src/auth/session.ts",
            "lines": [10, 40],
        },
    },
}


@pytest.fixture
def sample_cache() -> dict:
    return copy.deepcopy(SAMPLE_CACHE)


@pytest.fixture
def snapshot(sample_cache) -> Snapshot:
    return Snapshot.model_validate(sample_cache)


@pytest.fixture
def vars_file() -> VarsFile:
    return VarsFile.model_validate(copy.deepcopy(SAMPLE_VARS))


@pytest.fixture
def project_dir(tmp_path, sample_cache):
    """Project root with cache and vars files under .acp/."""
    acp_dir = tmp_path / ".acp"
    acp_dir.mkdir()
    (acp_dir / "acp.cache.json").write_text(json.dumps(sample_cache))
    (acp_dir / "acp.vars.json").write_text(json.dumps(SAMPLE_VARS))
    return tmp_path
