"""Exercise Handlers — user lookup, field rules, log assembly.

Invariants:
    - User lookup happens before field validation
    - today is injected, so default dates are deterministic
    - count equals len(log) after filtering and limiting
"""

from datetime import date
from uuid import uuid4

import pytest

from exercise_tracker.core.errors import (
    FieldRequiredError, InvalidFieldError, MalformedIdError, ResourceNotFoundError,
)
from exercise_tracker.services.handle_exercises import ExerciseHandlers

TODAY = date(2024, 3, 15)


@pytest.fixture
async def carol(user_repo):
    return await user_repo.create("carol")


@pytest.fixture
def handlers(user_repo, exercise_repo):
    return ExerciseHandlers(user_repo, exercise_repo)


async def test_add_exercise_defaults_to_today(handlers, carol, exercise_repo):
    result = await handlers.add_exercise(
        str(carol.id), {"description": "run", "duration": "30"}, TODAY,
    )
    assert result.id == carol.id
    assert result.username == "carol"
    assert result.date == "Fri Mar 15 2024"
    assert result.duration == 30
    assert result.description == "run"
    assert exercise_repo.rows[0].date == TODAY


async def test_add_exercise_uses_given_date(handlers, carol, exercise_repo):
    await handlers.add_exercise(
        str(carol.id),
        {"description": "run", "duration": "30", "date": "2023-02-01"},
        TODAY,
    )
    assert exercise_repo.rows[0].date == date(2023, 2, 1)


async def test_unknown_user_checked_before_fields(handlers):
    with pytest.raises(ResourceNotFoundError):
        await handlers.add_exercise(str(uuid4()), {}, TODAY)


async def test_malformed_id(handlers):
    with pytest.raises(MalformedIdError):
        await handlers.add_exercise("64b7f0", {}, TODAY)


@pytest.mark.parametrize("fields, error, field", [
    ({"duration": "30"}, FieldRequiredError, "description"),
    ({"description": "", "duration": "30"}, FieldRequiredError, "description"),
    ({"description": "run"}, FieldRequiredError, "duration"),
    ({"description": "run", "duration": "fast"}, InvalidFieldError, "duration"),
    ({"description": "run", "duration": "30", "date": "nope"}, InvalidFieldError, "date"),
])
async def test_add_exercise_field_errors(
    handlers, carol, exercise_repo, fields, error, field,
):
    with pytest.raises(error) as exc_info:
        await handlers.add_exercise(str(carol.id), fields, TODAY)
    assert exc_info.value.field == field
    assert exercise_repo.rows == []


async def test_log_filters_and_counts(handlers, carol):
    for day in ("2023-01-01", "2023-02-01", "2023-03-01"):
        await handlers.add_exercise(
            str(carol.id), {"description": day, "duration": "10", "date": day}, TODAY,
        )
    result = await handlers.get_exercise_log(
        str(carol.id), "2023-01-15", "2023-02-15",
    )
    assert result.count == 1
    assert [e.description for e in result.log] == ["2023-02-01"]


async def test_log_limit(handlers, carol):
    for i in range(5):
        await handlers.add_exercise(
            str(carol.id), {"description": f"set {i}", "duration": "5"}, TODAY,
        )
    result = await handlers.get_exercise_log(str(carol.id), limit="2")
    assert result.count == 2
    assert [e.description for e in result.log] == ["set 0", "set 1"]


async def test_log_unknown_user(handlers):
    with pytest.raises(ResourceNotFoundError):
        await handlers.get_exercise_log(str(uuid4()))
