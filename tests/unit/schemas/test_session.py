"""Tests for session record decoding and normalisation."""

import datetime

import pytest
from pydantic import ValidationError

from athlete_tracker.schemas.session import BroadJumps, MatrixSession, Player, TrainingSession


def _raw(**overrides) -> dict:
    raw = {
        "id": "s1",
        "playerId": "p1",
        "playerName": "Alex",
        "date": "2024-01-05",
        "runTime": "07:30",
        "broadJumps": {
            "leftSingle": 200, "rightSingle": 180, "doubleSingle": 0,
            "leftTriple": 0, "rightTriple": 0, "doubleTriple": 0,
        },
        "sprints": [12, 11, 10, 10, 9, 8],
    }
    raw.update(overrides)
    return raw


class TestTrainingSessionDecoding:
    def test_camel_case_document(self):
        s = TrainingSession.model_validate(_raw())
        assert s.player_id == "p1"
        assert s.date == datetime.date(2024, 1, 5)
        assert s.run_time == "07:30"
        assert s.broad_jumps.left_single == 200
        assert s.sprints == (12, 11, 10, 10, 9, 8)

    def test_snake_case_accepted(self):
        s = TrainingSession(player_id="p1", date="2024-01-05", run_time="08:00")
        assert s.run_time == "08:00"

    def test_zero_jumps_are_not_recorded(self):
        s = TrainingSession.model_validate(_raw())
        assert s.broad_jumps.double_single is None
        assert s.broad_jumps.left_triple is None

    @pytest.mark.parametrize("run_time", ["", "   ", None])
    def test_blank_run_time_is_none(self, run_time):
        s = TrainingSession.model_validate(_raw(runTime=run_time))
        assert s.run_time is None

    def test_malformed_run_time_kept_for_engine(self):
        s = TrainingSession.model_validate(_raw(runTime="7.30"))
        assert s.run_time == "7.30"

    def test_zero_sprints_are_not_recorded(self):
        s = TrainingSession.model_validate(_raw(sprints=[0, 0, 12, 10, 9, 7]))
        assert s.sprints == (None, None, 12, 10, 9, 7)
        assert s.recorded_sprints == [12, 10, 9, 7]

    def test_short_sprints_padded(self):
        s = TrainingSession.model_validate(_raw(sprints=[12, 11]))
        assert len(s.sprints) == 6
        assert s.sprints[2:] == (None, None, None, None)

    def test_missing_sprints_and_jumps(self):
        s = TrainingSession.model_validate({"playerId": "p1", "date": "2024-01-05"})
        assert s.recorded_sprints == []
        assert s.broad_jumps == BroadJumps()

    def test_string_numbers_from_forms(self):
        s = TrainingSession.model_validate(_raw(sprints=["12", "11.5", "", "0", None, "9"]))
        assert s.sprints == (12.0, 11.5, None, None, None, 9.0)

    def test_too_many_sprints_rejected(self):
        with pytest.raises(ValidationError):
            TrainingSession.model_validate(_raw(sprints=[1, 2, 3, 4, 5, 6, 7]))

    def test_negative_jump_rejected(self):
        with pytest.raises(ValidationError):
            TrainingSession.model_validate(_raw(broadJumps={"leftSingle": -5}))

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError):
            TrainingSession.model_validate(_raw(date="2024-13-01"))

    @pytest.mark.parametrize("date", ["2024-01-011", "2024-12-3199", "2024-01-05garbage"])
    def test_trailing_characters_after_day_rejected(self, date):
        with pytest.raises(ValidationError):
            TrainingSession.model_validate(_raw(date=date))

    def test_date_with_offset_keeps_calendar_day(self):
        s = TrainingSession.model_validate(_raw(date="2024-01-05T23:30:00-08:00"))
        assert s.date == datetime.date(2024, 1, 5)

    def test_records_are_frozen(self):
        s = TrainingSession.model_validate(_raw())
        with pytest.raises(ValidationError):
            s.run_time = "06:00"

    def test_serialises_to_camel_case(self):
        dumped = TrainingSession.model_validate(_raw()).model_dump(by_alias=True)
        assert dumped["playerId"] == "p1"
        assert dumped["broadJumps"]["leftSingle"] == 200
        assert dumped["runTime"] == "07:30"


class TestMatrixSessionDecoding:
    def test_zero_scores_are_not_recorded(self):
        m = MatrixSession.model_validate({
            "playerId": "p1", "date": "2024-01-05",
            "exercises": {"volleyFigure8": 72.5, "slalom": 0, "beepTest": ""},
        })
        assert m.exercises == {"volleyFigure8": 72.5, "slalom": None, "beepTest": None}
        assert m.recorded_scores == {"volleyFigure8": 72.5}

    def test_trailing_characters_after_day_rejected(self):
        with pytest.raises(ValidationError):
            MatrixSession.model_validate({"playerId": "p1", "date": "2024-01-011", "exercises": {"slalom": 60}})

    def test_score_above_100_rejected(self):
        with pytest.raises(ValidationError):
            MatrixSession.model_validate({"playerId": "p1", "date": "2024-01-05",
                                          "exercises": {"slalom": 101}})


class TestPlayer:
    def test_player(self):
        assert Player(id="p1", name="Alex").name == "Alex"
