"""Tests for name/time/record helpers and team abbreviations."""

from __future__ import annotations

import pytest

from services.formatting import format_game_time, format_player_name, format_record, safe_int
from services.teams import team_abbrev


class TestFormatPlayerName:
    @pytest.mark.parametrize(
        "full, expected",
        [
            ("Shohei Ohtani", "S.Ohtani"),
            ("Mike Trout", "M.Trout"),
            ("Ronald Acuna Jr.", "R.Jr."),
            ("Jose  Ramirez", "J.Ramirez"),
        ],
    )
    def test_first_initial_and_last_token(self, full: str, expected: str) -> None:
        assert format_player_name(full) == expected

    def test_single_token_unchanged(self) -> None:
        assert format_player_name("Ichiro") == "Ichiro"

    def test_missing_name(self) -> None:
        assert format_player_name(None) == ""
        assert format_player_name("") == ""


class TestSafeInt:
    def test_values(self) -> None:
        assert safe_int("7") == 7
        assert safe_int(3) == 3
        assert safe_int(None) == 0
        assert safe_int("x") == 0
        assert safe_int(None, None) is None


class TestFormatRecord:
    def test_defaults_to_zero(self) -> None:
        assert format_record(None, None) == "0-0"
        assert format_record(10, "4") == "10-4"


class TestFormatGameTime:
    def test_converts_to_display_zone(self) -> None:
        assert format_game_time("2025-07-04T23:05:00Z", "America/New_York") == "7:05 PM EDT"

    def test_winter_time_uses_standard_abbreviation(self) -> None:
        assert format_game_time("2025-03-01T18:10:00Z", "America/New_York") == "1:10 PM EST"

    def test_bad_input(self) -> None:
        assert format_game_time("") == ""
        assert format_game_time("not a date") == ""


class TestTeamAbbrev:
    def test_known_team(self) -> None:
        assert team_abbrev("New York Yankees") == "NYY"
        assert team_abbrev("Kansas City Royals") == "KC"

    def test_aliases(self) -> None:
        assert team_abbrev("Athletics") == "OAK"
        assert team_abbrev("Cleveland Indians") == "CLE"

    def test_unknown_falls_back_to_prefix(self) -> None:
        assert team_abbrev("Durham Bulls") == "DUR"
        assert team_abbrev("Ab") == "AB"

    def test_empty(self) -> None:
        assert team_abbrev(None) == ""
        assert team_abbrev("") == ""
