# tests/conftest.py
import itertools
import random
from types import SimpleNamespace

import pytest
from postgrest.exceptions import APIError

from neighborfit.database import (
    NeighborhoodRepository,
    PreferencesRepository,
    ResultRepository,
)
from neighborfit.matching import MatchingEngine, ScoringConfig

from .fixtures.neighborhoods import catalog


class FakeQuery:
    """Subconjunto del query builder de postgrest que usan los repositorios."""

    def __init__(self, db: "FakeSupabase", table: str):
        self.db = db
        self.table_name = table
        self._op = "select"
        self._columns = "*"
        self._payload = None
        self._on_conflict = None
        self._filters = []
        self._order = None
        self._limit = None

    def select(self, columns: str = "*"):
        self._columns = columns
        return self

    def insert(self, rows):
        self._op, self._payload = "insert", rows
        return self

    def upsert(self, rows, on_conflict: str = ""):
        self._op, self._payload, self._on_conflict = "upsert", rows, on_conflict
        return self

    def update(self, data):
        self._op, self._payload = "update", data
        return self

    def delete(self):
        self._op = "delete"
        return self

    def eq(self, column, value):
        self._filters.append((column, value))
        return self

    def order(self, column, desc: bool = False):
        self._order = (column, desc)
        return self

    def limit(self, count: int):
        self._limit = count
        return self

    def _matches(self, row: dict) -> bool:
        return all(row.get(col) == value for col, value in self._filters)

    def execute(self):
        self.db.calls.append((self.table_name, self._op))
        if (self.table_name, self._op) in self.db.failures:
            raise APIError({"message": f"{self._op} rechazado", "code": "23505"})

        rows = self.db.tables.setdefault(self.table_name, [])
        handler = getattr(self, f"_execute_{self._op}")
        return SimpleNamespace(data=handler(rows))

    def _execute_select(self, rows):
        selected = [dict(r) for r in rows if self._matches(r)]
        if "neighborhood:neighborhoods(*)" in self._columns:
            by_id = {n["id"]: n for n in self.db.tables.get("neighborhoods", [])}
            for row in selected:
                row["neighborhood"] = by_id.get(row["neighborhood_id"])
        if self._order:
            column, desc = self._order
            selected.sort(key=lambda r: r[column], reverse=desc)
        if self._limit is not None:
            selected = selected[: self._limit]
        return selected

    def _execute_insert(self, rows):
        payload = self._payload if isinstance(self._payload, list) else [self._payload]
        inserted = [self.db.new_row(data) for data in payload]
        rows.extend(inserted)
        return [dict(r) for r in inserted]

    def _execute_upsert(self, rows):
        payload = self._payload if isinstance(self._payload, list) else [self._payload]
        keys = [k.strip() for k in self._on_conflict.split(",") if k.strip()]
        saved = []
        for data in payload:
            existing = next(
                (r for r in rows if keys and all(r.get(k) == data.get(k) for k in keys)),
                None,
            )
            if existing is not None:
                existing.update(data)
                saved.append(dict(existing))
            else:
                row = self.db.new_row(data)
                rows.append(row)
                saved.append(dict(row))
        return saved

    def _execute_update(self, rows):
        updated = []
        for row in rows:
            if self._matches(row):
                row.update(self._payload)
                updated.append(dict(row))
        return updated

    def _execute_delete(self, rows):
        deleted = [r for r in rows if self._matches(r)]
        rows[:] = [r for r in rows if not self._matches(r)]
        return deleted


class FakeSupabase:
    """Base en memoria con la interfaz de SupabaseClient.table()."""

    def __init__(self):
        self.tables: dict[str, list[dict]] = {}
        self.failures: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str]] = []
        self._ids = itertools.count(1)

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self, name)

    def new_row(self, data: dict) -> dict:
        row_id = next(self._ids)
        row = {"id": row_id, "created_at": f"2024-01-01T00:00:{row_id:02d}"}
        row.update(data)
        return row

    def fail(self, table: str, op: str):
        self.failures.add((table, op))


@pytest.fixture
def fake_db():
    return FakeSupabase()


@pytest.fixture
def seeded_db(fake_db):
    fake_db.tables["neighborhoods"] = [n.to_db_dict() for n in catalog()]
    return fake_db


@pytest.fixture
def deterministic_config():
    return ScoringConfig(jitter_amplitude=0.0)


@pytest.fixture
def engine(seeded_db, deterministic_config):
    return MatchingEngine(
        preferences_repo=PreferencesRepository(seeded_db),
        neighborhood_repo=NeighborhoodRepository(seeded_db),
        result_repo=ResultRepository(seeded_db),
        config=deterministic_config,
        rng=random.Random(7),
    )
