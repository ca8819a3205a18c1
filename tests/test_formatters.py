"""Tests for ownership report formatters."""

import io
import json

import pytest
from rich.console import Console

from git_trivia.formatters import JsonFormatter, RichFormatter, get_formatter
from git_trivia.ownership import OwnershipScore, OwnershipStatistics
from git_trivia.people.models import Person
from git_trivia.tracking import CombinedTracker


@pytest.fixture
def statistics():
    """Jane 13 lines on Platform, John 5 lines without a team."""
    tracking = CombinedTracker(OwnershipScore)
    jane = Person("Jane Doe", ("jane@x.com",), team="Platform")
    john = Person("John Doe", ("john@x.com",))
    tracking.track(jane, lambda score: score.add_lines(13))
    tracking.track(john, lambda score: score.add_lines(5))
    return OwnershipStatistics(tracking)


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("console"), RichFormatter)
        assert isinstance(get_formatter("json"), JsonFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestJsonFormatter:
    """Test JSON output."""

    def test_structure(self, statistics):
        data = json.loads(JsonFormatter().format(statistics))

        assert data["total_lines"] == 18
        assert list(data["people"]) == ["Jane Doe", "John Doe"]
        assert data["people"]["Jane Doe"] == {"total_lines_owned": 13, "percent_owned": 72.2222}
        assert data["people"]["John Doe"]["percent_owned"] == pytest.approx(27.7778)

    def test_unaffiliated_team_key(self, statistics):
        data = json.loads(JsonFormatter().format(statistics))

        assert list(data["teams"]) == ["Platform", "(No team)"]
        assert data["teams"]["(No team)"]["total_lines_owned"] == 5

    def test_render_prints(self, statistics, capsys):
        JsonFormatter().render(statistics)
        assert json.loads(capsys.readouterr().out)["total_lines"] == 18


class TestRichFormatter:
    """Test terminal output."""

    def test_contains_totals_and_rankings(self, statistics):
        text = RichFormatter().format(statistics)

        assert "Ownership details" in text
        assert "Total lines: 18" in text
        assert "Jane Doe" in text
        assert "72.22%" in text
        assert "27.78%" in text

    def test_unaffiliated_label(self, statistics):
        text = RichFormatter().format(statistics)
        assert "(Others)" in text
        assert "Platform" in text

    def test_people_ranked_in_order(self, statistics):
        text = RichFormatter().format(statistics)
        assert text.index("Jane Doe") < text.index("John Doe")

    def test_render_to_given_console(self, statistics):
        out = io.StringIO()
        RichFormatter(Console(file=out, width=100)).render(statistics)

        assert "John Doe" in out.getvalue()

    def test_zero_lines(self):
        """An empty report still prints both tables with 0.00%."""
        text = RichFormatter().format(OwnershipStatistics(CombinedTracker(OwnershipScore)))

        assert "Total lines: 0" in text
        assert "0.00%" in text
