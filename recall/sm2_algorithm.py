from dataclasses import dataclass
from datetime import datetime, timedelta
import math

from recall.errors import ValidationError
from recall.grade import Grade, validate_grade

MIN_EASE_FACTOR = 1.3
DEFAULT_EASE_FACTOR = 2.5
INITIAL_INTERVAL = 1
FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


@dataclass(frozen=True)
class SchedulingState:
    interval: int
    repetition: int
    ease_factor: float

    @staticmethod
    def new_state() -> 'SchedulingState':
        return SchedulingState(
            interval=INITIAL_INTERVAL,
            repetition=0,
            ease_factor=DEFAULT_EASE_FACTOR,
        )

    @property
    def is_warm(self) -> bool:
        return self.repetition >= 1


def compute_next_schedule(current: SchedulingState, grade: int) -> SchedulingState:
    """
    Apply one graded review to a scheduling state (SM-2).

    A failing grade (0-2) collapses the item back to a one day interval and
    restarts the repetition count, keeping the ease factor. A passing grade
    (3-5) adjusts the ease factor, floored at 1.3, and grows the interval:
    1 day after the first success, 6 after the second, then the previous
    interval times the new ease factor.

    `current` is never modified, a new state is returned. Raises
    ValidationError for a grade outside 0-5 or a malformed state.
    """
    grade = validate_grade(grade)
    _check_state(current)

    if not grade.is_success:
        return SchedulingState(
            interval=FIRST_INTERVAL,
            repetition=0,
            ease_factor=current.ease_factor,
        )

    ease_factor = next_ease_factor(current.ease_factor, grade)
    repetition = current.repetition + 1

    if repetition == 1:
        interval = FIRST_INTERVAL
    elif repetition == 2:
        interval = SECOND_INTERVAL
    else:
        interval = round_half_up(current.interval * ease_factor)

    return SchedulingState(
        interval=interval,
        repetition=repetition,
        ease_factor=ease_factor,
    )


def next_ease_factor(ease_factor: float, grade: Grade) -> float:
    distance = 5 - grade.value
    ease_factor = ease_factor + (0.1 - distance * (0.08 + distance * 0.02))

    return max(ease_factor, MIN_EASE_FACTOR)


def round_half_up(value: float) -> int:
    # halves go away from zero (12.5 -> 13), builtin round() would give 12
    return int(math.floor(value + 0.5))


def next_review_at(state: SchedulingState, now: datetime) -> datetime:
    return now + timedelta(days=state.interval)


def _check_state(state: SchedulingState):
    if isinstance(state.interval, bool) or not isinstance(state.interval, int) or state.interval < 1:
        raise ValidationError(f"Invalid interval: {state.interval!r}")

    if isinstance(state.repetition, bool) or not isinstance(state.repetition, int) or state.repetition < 0:
        raise ValidationError(f"Invalid repetition: {state.repetition!r}")

    if not math.isfinite(state.ease_factor) or state.ease_factor < MIN_EASE_FACTOR:
        raise ValidationError(f"Invalid ease factor: {state.ease_factor!r}")
