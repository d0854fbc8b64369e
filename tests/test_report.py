"""
Tests for the Preference Report CLI.

Validates:
- Scenario loading from JSON
- Item uses applied before rendering
- Invalid scenarios reported with a failing exit code
"""

from __future__ import annotations

from pathlib import Path

import pytest
from rich.console import Console

from catallaxy.report import load_scenario, main, render_actor, run_report
from catallaxy.agents.actor import Actor

FIXTURE = Path(__file__).parent / "fixtures" / "crusoe.json"


def _console() -> Console:
    return Console(record=True, width=120)


class TestPreferenceReport:
    """Test rendering an actor's preferences."""

    def test_load_scenario(self):
        scenario = load_scenario(FIXTURE)
        assert scenario.name == "crusoe"
        assert len(scenario.hierarchy) == 3

    def test_render_lists_items_and_goals(self):
        actor = Actor.from_scenario(load_scenario(FIXTURE))
        out = _console()
        render_actor(actor, out)
        text = out.export_text()
        assert "crusoe" in text
        assert "berries" in text
        assert "feed_parrot" in text

    def test_uses_applied_in_order(self):
        out = _console()
        assert run_report(FIXTURE, uses=["berries", "berries"], out=out)
        text = out.export_text()
        assert "satisfied eat" in text

    def test_invalid_scenario(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text('{"name": "x", "hierarchy": [{"kind": "one_shot", "goal": "a"}]}')
        out = _console()
        assert not run_report(bad, out=out)
        assert "Could not load scenario" in out.export_text()

    def test_missing_file(self, tmp_path):
        out = _console()
        assert not run_report(tmp_path / "missing.json", out=out)

    def test_main_exit_codes(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main([str(FIXTURE), "--use", "water"])
        assert exc.value.code == 0

        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "missing.json")])
        assert exc.value.code == 1
