from types import SimpleNamespace

import pytest

from neighborfit.database import ResultPersistenceError
from neighborfit.matching import MatchRun
from neighborfit.scripts import run_matching, verify_matching


class StubEngine:
    def __init__(self, run=None, stats=None, error=None):
        self._run = run
        self._stats = stats
        self._error = error

    def calculate_and_save_matches(self, user_id):
        if self._error:
            raise self._error
        return self._run

    def recalculate_all(self):
        return self._stats


def _patch_engine(monkeypatch, **kwargs):
    monkeypatch.setattr(run_matching, "MatchingEngine", lambda: StubEngine(**kwargs))


def test_single_user_ok(monkeypatch):
    _patch_engine(monkeypatch, run=MatchRun("u1", "ok", [{"id": 1}]))

    assert run_matching.run_matching("u1") == 0


def test_single_user_without_quiz_fails(monkeypatch):
    _patch_engine(monkeypatch, run=MatchRun("u1", "missing_preferences"))

    assert run_matching.run_matching("u1") == 1


def test_single_user_persistence_error(monkeypatch):
    _patch_engine(monkeypatch, error=ResultPersistenceError("u1"))

    assert run_matching.run_matching("u1") == 1


@pytest.mark.parametrize("errors,expected", [(0, 0), (2, 1)])
def test_all_users_exit_code(monkeypatch, errors, expected):
    stats = {"users_processed": 3, "matches_saved": 12, "skipped": 0, "errors": errors}
    _patch_engine(monkeypatch, stats=stats)

    assert run_matching.run_matching() == expected


def _patch_verify(monkeypatch, rows):
    settings = SimpleNamespace(
        score_base=40.0,
        score_variable=55.0,
        score_boost_ranks=10,
        score_boost_step=2.0,
        score_jitter_amplitude=1.0,
        score_decimals=1,
    )
    monkeypatch.setattr(verify_matching, "get_settings", lambda: settings)
    monkeypatch.setattr(
        verify_matching,
        "ResultRepository",
        lambda: SimpleNamespace(get_recent=lambda limit: rows[:limit]),
    )


def test_verify_passes_in_range(monkeypatch, capsys):
    rows = [
        {"user_id": "user-aaaaaaaa", "neighborhood_id": i, "match_score": 60.0 + i}
        for i in range(5)
    ]
    _patch_verify(monkeypatch, rows)

    assert verify_matching.verify(limit=50) == 0
    assert "DISTRIBUCIÓN" in capsys.readouterr().out


def test_verify_fails_out_of_range(monkeypatch):
    rows = [{"user_id": "user-bbbbbbbb", "neighborhood_id": 1, "match_score": 99.0}]
    _patch_verify(monkeypatch, rows)

    assert verify_matching.verify() == 1


def test_verify_without_results(monkeypatch):
    _patch_verify(monkeypatch, [])

    assert verify_matching.verify() == 1
