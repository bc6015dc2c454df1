"""Tests for entry-time form validation."""

import datetime

import pytest

from athlete_tracker.services.validators import (
    build_matrix_session_from_form,
    build_session_from_form,
    validate_broad_jump,
    validate_matrix_form,
    validate_matrix_score,
    validate_player_name,
    validate_run_time_entry,
    validate_session_date,
    validate_session_form,
    validate_sprint_reps,
)

TODAY = datetime.date(2024, 6, 15)


class TestFieldValidators:
    @pytest.mark.parametrize("value, valid", [
        ("04:00", True),
        ("7:30", True),
        ("15:00", True),
        ("03:59", False),
        ("15:01", False),
        ("60:00", False),
        ("07:5", False),
        ("07:60", False),
        ("abc", False),
        ("", True),
        (None, True),
    ])
    def test_run_time(self, value, valid):
        assert validate_run_time_entry(value).valid is valid

    def test_run_time_error_message(self):
        assert validate_run_time_entry("abc").error == "Run time must be in MM:SS format (e.g., 07:30)"

    @pytest.mark.parametrize("value, valid", [
        (50, True),
        (500, True),
        ("200", True),
        (49, False),
        (501, False),
        ("abc", False),
        ("", True),
    ])
    def test_broad_jump(self, value, valid):
        assert validate_broad_jump(value).valid is valid

    def test_broad_jump_label_in_error(self):
        assert validate_broad_jump(20, "Left single jump").error.startswith("Left single jump")

    @pytest.mark.parametrize("value, valid", [
        (0, True),
        (60, True),
        (12.5, True),
        ("12.3", True),
        (60.1, False),
        (-1, False),
        (12.25, False),
        ("nan", False),
        ("", True),
    ])
    def test_sprint_reps(self, value, valid):
        assert validate_sprint_reps(value).valid is valid

    @pytest.mark.parametrize("value, valid", [
        ("2024-06-15", True),
        ("2019-06-15", True),
        (datetime.date(2024, 1, 1), True),
        (datetime.datetime(2024, 6, 15, 18, 30), True),
        (datetime.datetime(2024, 6, 16, 0, 5), False),
        ("2024-06-16", False),
        ("2019-06-14", False),
        ("2024-02-30", False),
        ("15/06/2024", False),
        ("", False),
        (None, False),
    ])
    def test_session_date(self, value, valid):
        assert validate_session_date(value, today=TODAY).valid is valid

    def test_session_date_leap_day_reference(self):
        assert validate_session_date("2019-02-28", today=datetime.date(2024, 2, 29)).valid
        assert not validate_session_date("2019-02-27", today=datetime.date(2024, 2, 29)).valid

    @pytest.mark.parametrize("name, valid", [
        ("Jo", True),
        ("Mary-Jane O'Neil", True),
        ("J. R. Smith", True),
        ("Zoë Ångström", True),
        ("J", False),
        ("R2D2", False),
        ("x" * 51, False),
        ("", False),
        ("   ", False),
    ])
    def test_player_name(self, name, valid):
        assert validate_player_name(name).valid is valid

    @pytest.mark.parametrize("value, valid", [(0, True), (100, True), ("72.5", True), (101, False), (-1, False),
                                              ("", True)])
    def test_matrix_score(self, value, valid):
        assert validate_matrix_score(value).valid is valid


class TestFormValidators:
    def test_valid_session_form(self):
        form = {"date": "2024-06-01", "runTime": "07:30", "leftSingle": "200", "sprint1": "12"}
        result = validate_session_form(form, today=TODAY)
        assert result.valid
        assert result.errors == []

    def test_every_failing_field_reported(self):
        form = {"date": "2024-07-01", "runTime": "3:00", "leftSingle": "20", "sprint6": "70"}
        result = validate_session_form(form, today=TODAY)
        assert not result.valid
        assert len(result.errors) == 4
        assert "Sprint set 6 must be between 0 and 60" in result.errors

    def test_matrix_form_needs_a_score(self):
        result = validate_matrix_form({"date": "2024-06-01"}, today=TODAY)
        assert not result.valid
        assert result.errors == ["Enter a score for at least one exercise"]

    def test_valid_matrix_form(self):
        result = validate_matrix_form({"date": "2024-06-01", "slalom": "65"}, today=TODAY)
        assert result.valid


class TestFormDecoding:
    def test_build_session(self):
        form = {
            "date": "2024-06-01", "runTime": "07:30", "leftSingle": "200", "rightSingle": "",
            "sprint1": "12", "sprint2": "11.5", "sprint3": "",
        }
        session = build_session_from_form(form, "p1", "Alex")
        assert session.player_id == "p1"
        assert session.player_name == "Alex"
        assert session.run_time == "07:30"
        assert session.broad_jumps.left_single == 200
        assert session.broad_jumps.right_single is None
        assert session.sprints == (12, 11.5, None, None, None, None)

    def test_build_matrix_session(self):
        session = build_matrix_session_from_form({"date": "2024-06-01", "slalom": "65"}, "p1")
        assert session.recorded_scores == {"slalom": 65}
        assert session.exercises["beepTest"] is None
