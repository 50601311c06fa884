from enum import IntEnum

from recall.errors import ValidationError

MIN_GRADE = 0
MAX_GRADE = 5
PASSING_GRADE = 3


class Grade(IntEnum):
    BLACKOUT = 0
    WRONG = 1
    ALMOST = 2
    HARD = 3
    GOOD = 4
    EASY = 5

    @property
    def is_success(self) -> bool:
        return self.value >= PASSING_GRADE


def validate_grade(value) -> Grade:
    # bools are not grades
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"Invalid grade: {value!r} is not an integer")

    if value < MIN_GRADE or value > MAX_GRADE:
        raise ValidationError(f"Invalid grade: must be {MIN_GRADE}-{MAX_GRADE}, got {value}")

    return Grade(value)
