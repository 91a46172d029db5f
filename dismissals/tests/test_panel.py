"""Tests for the text panel renderer."""

from __future__ import annotations

from datetime import datetime, timezone

from dismissals.data.dismissal import DismissalRecord, DismissalType, FieldCoordinate
from dismissals.render.panel import (
    TextPanelRenderer,
    detail_lines,
    record_marker,
    stats_panel_lines,
)
from dismissals.state.store import Statistics


def make_record(**overrides) -> DismissalRecord:
    values = dict(
        id=1_700_000_000_000,
        position=FieldCoordinate(450, 320),
        dismissal_type=DismissalType.RUN_OUT,
        runs_scored=15,
        balls_faced=1,
        created_at=datetime(2024, 3, 9, 14, 5, 30, tzinfo=timezone.utc),
    )
    values.update(overrides)
    return DismissalRecord(**values)


class TestStatsPanel:
    def test_empty_state_prompt(self):
        assert stats_panel_lines(Statistics()) == ["Click on the field to add your first dismissal"]

    def test_populated_panel(self):
        stats = Statistics(
            count=3,
            total_runs=35,
            total_balls=29,
            average_runs_per_dismissal=11.7,
            overall_strike_rate=120.7,
            counts_by_type=((DismissalType.BOWLED, 2), (DismissalType.CAUGHT, 1)),
            most_common_type=DismissalType.BOWLED,
        )
        lines = stats_panel_lines(stats)
        assert lines[:7] == [
            "Total Dismissals: 3",
            "Total Runs: 35",
            "Total Balls Faced: 29",
            "Average Runs per Dismissal: 11.7",
            "Overall Strike Rate: 120.7%",
            "Most Common Dismissal: Bowled",
            "Dismissal Breakdown:",
        ]
        assert lines[7:] == ["  Bowled: 2", "  Caught: 1"]


class TestDetail:
    def test_detail_lines(self):
        lines = detail_lines(make_record(bowler_or_fielder="Khan", notes="Direct hit"))
        assert lines[0] == "Dismissal Type: Run Out"
        assert "Bowler/Fielder: Khan" in lines
        assert "Runs Scored: 15" in lines
        assert "Balls Faced: 1" in lines
        assert "Strike Rate: 1500.0%" in lines
        assert any(line.startswith("Date & Time: ") for line in lines)
        assert lines[-1] == "Notes: Direct hit"

    def test_missing_bowler_and_notes(self):
        lines = detail_lines(make_record())
        assert "Bowler/Fielder: Not specified" in lines
        assert not any(line.startswith("Notes:") for line in lines)


class TestMarkers:
    def test_record_marker_colour(self):
        marker = record_marker(make_record(dismissal_type=DismissalType.LBW))
        assert (marker.x, marker.y) == (450, 320)
        assert marker.color == "#9c27b0"
        assert marker.radius == 6
        assert marker.record_id == 1_700_000_000_000
        assert not marker.is_pending

    def test_type_labels(self):
        assert DismissalType.LBW.label == "LBW"
        assert DismissalType.HIT_WICKET.label == "Hit Wicket"
        assert DismissalType.OTHER.color == "#607d8b"

    def test_render_replaces_markers(self):
        renderer = TextPanelRenderer()
        records = (make_record(), make_record(id=2, position=FieldCoordinate(700, 500)))
        renderer.render(records, Statistics(count=2, total_runs=30, total_balls=2,
                                            average_runs_per_dismissal=15.0,
                                            overall_strike_rate=1500.0,
                                            counts_by_type=((DismissalType.RUN_OUT, 2),),
                                            most_common_type=DismissalType.RUN_OUT))
        assert [m.record_id for m in renderer.markers] == [1_700_000_000_000, 2]
        assert "Most Common Dismissal: Run Out" in renderer.panel_text()

        renderer.render((), Statistics())
        assert renderer.markers == []
        assert renderer.render_count == 2
