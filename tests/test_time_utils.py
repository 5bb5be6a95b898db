from datetime import UTC, date, datetime

import pytest
from pydantic_core import PydanticCustomError

from brackets.time_utils import coerce_game_time, parse_game_time, parse_iso_strict


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2026-02-16T10:00:00Z", datetime(2026, 2, 16, 10, 0, tzinfo=UTC)),
        ("2026-02-16T10:00:00.000+0000", datetime(2026, 2, 16, 10, 0, tzinfo=UTC)),
        ("2026-02-16T10:00:00+0000", datetime(2026, 2, 16, 10, 0, tzinfo=UTC)),
        ("2026-02-16 10:00:00", datetime(2026, 2, 16, 10, 0, tzinfo=UTC)),
        ("2026-02-16", datetime(2026, 2, 16, 0, 0, tzinfo=UTC)),
    ],
)
def test_parse_game_time_accepts_each_known_format(raw: str, expected: datetime) -> None:
    parsed = parse_game_time(raw)

    assert parsed == expected
    assert parsed is not None
    assert parsed.date() == date(2026, 2, 16)


def test_parse_game_time_normalizes_offsets_to_utc() -> None:
    parsed = parse_game_time("2026-02-16T10:00:00-06:00")

    assert parsed == datetime(2026, 2, 16, 16, 0, tzinfo=UTC)


def test_parse_game_time_rejects_unknown_format() -> None:
    assert parse_game_time("16/02/2026") is None
    assert parse_game_time("") is None


def test_parse_iso_strict_requires_time_and_zone() -> None:
    assert parse_iso_strict("2026-02-16") is None
    assert parse_iso_strict("2026-02-16T10:00:00") is None
    assert parse_iso_strict("2026-02-16T10:00:00Z") == datetime(2026, 2, 16, 10, tzinfo=UTC)


def test_coerce_game_time_raises_data_corrupted_for_unparseable_string() -> None:
    with pytest.raises(PydanticCustomError) as excinfo:
        coerce_game_time("16/02/2026")

    assert excinfo.value.type == "data_corrupted"
    assert "16/02/2026" in excinfo.value.message()


def test_coerce_game_time_passes_none_and_rejects_numbers() -> None:
    assert coerce_game_time(None) is None
    with pytest.raises(PydanticCustomError) as excinfo:
        coerce_game_time(1771236000)
    assert excinfo.value.type == "type_mismatch"

