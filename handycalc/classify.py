"""Everyday classifications: ages, calendars, grades, parity, weather and letters."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

MAX_SUBJECT_MARK = 100
PASS_MARK = 40
DISTINCTION_PERCENT = 75
FIRST_CLASS_PERCENT = 60
SECOND_CLASS_PERCENT = 50

_VOWELS = frozenset("aeiou")

_DAYS_IN_MONTH: dict[int, tuple[int, ...]] = {
    1: (31,),
    2: (28, 29),
    3: (31,),
    4: (30,),
    5: (31,),
    6: (30,),
    7: (31,),
    8: (31,),
    9: (30,),
    10: (31,),
    11: (30,),
    12: (31,),
}

_LETTER_GRADES: tuple[tuple[int, str], ...] = (
    (90, "A+"),
    (80, "A"),
    (70, "B+"),
    (60, "B"),
    (50, "C+"),
    (40, "C"),
    (35, "D"),
    (0, "F"),
)

_WEATHER_ADVICE: tuple[tuple[int, str], ...] = (
    (40, "It's extremely hot outside. Stay hydrated and avoid direct sunlight."),
    (30, "It's hot today. Wear light clothes and drink plenty of water."),
    (20, "The weather is warm and pleasant."),
    (10, "It's a bit cool. You might need a light jacket."),
    (0, "It's cold outside. Wear warm clothes."),
)
_FREEZING_ADVICE = "It's freezing! Stay indoors and keep warm."


def age(birth_year: int, current_year: int) -> int:
    """Age in years of someone born in ``birth_year``."""
    return current_year - birth_year


def days_in_month(month: int) -> tuple[int, ...]:
    """Possible numbers of days in a month numbered 1 to 12."""
    try:
        return _DAYS_IN_MONTH[month]
    except KeyError:
        raise ValueError("invalid month number, expected 1-12") from None


@dataclass(frozen=True)
class GradeReport:
    """Result of a set of subject marks."""

    total: float
    achieved: float
    percentage: float
    failed: bool
    passed: bool
    division: str


def _division(percentage: float) -> str:
    if percentage > DISTINCTION_PERCENT:
        return "distinction"
    if FIRST_CLASS_PERCENT <= percentage < DISTINCTION_PERCENT:
        return "first class"
    if SECOND_CLASS_PERCENT <= percentage < FIRST_CLASS_PERCENT:
        return "second class"
    return "third class"


def grade_report(marks: Iterable[float]) -> GradeReport:
    """Totals, percentage, pass/fail flags and division for subject marks out of 100."""
    marks = list(marks)
    if not marks:
        raise ValueError("at least one subject mark is required")
    if any(mark > MAX_SUBJECT_MARK for mark in marks):
        raise ValueError("marks should not exceed 100")
    total = float(MAX_SUBJECT_MARK * len(marks))
    achieved = float(sum(marks))
    percentage = achieved / total * 100
    return GradeReport(
        total=total,
        achieved=achieved,
        percentage=percentage,
        failed=any(mark < PASS_MARK for mark in marks),
        passed=any(mark > PASS_MARK for mark in marks),
        division=_division(percentage),
    )


def letter_grade(marks: int) -> str:
    """Letter grade for marks between 0 and 100."""
    if not 0 <= marks <= MAX_SUBJECT_MARK:
        raise ValueError("marks must be between 0 and 100")
    return next(grade for floor, grade in _LETTER_GRADES if marks >= floor)


def is_even(number: int) -> bool:
    """True if ``number`` is divisible by two."""
    return number % 2 == 0


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule for a positive year."""
    if year <= 0:
        raise ValueError(f"{year} is not a valid positive year")
    return year % 400 == 0 or (year % 4 == 0 and year % 100 != 0)


def smallest(a: int, b: int, c: int) -> int:
    """The smallest of three numbers."""
    return min(a, b, c)


def largest(a: int, b: int, c: int) -> int:
    """The largest of three numbers."""
    return max(a, b, c)


def weather_advice(temperature: int) -> str:
    """Advice for the given temperature in degrees Celsius."""
    return next(
        (advice for floor, advice in _WEATHER_ADVICE if temperature > floor),
        _FREEZING_ADVICE,
    )


class LetterKind(Enum):
    """Whether a character is a vowel, a consonant or neither."""

    VOWEL = "vowel"
    CONSONANT = "consonant"
    NEITHER = "neither"


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def is_vowel(char: str) -> bool:
    """True if ``char`` is one of a, e, i, o, u in either case."""
    return char.lower() in _VOWELS


def letter_kind(char: str) -> LetterKind:
    """Classify a single character."""
    if len(char) != 1:
        raise ValueError("expected exactly one character")
    if not _is_letter(char):
        return LetterKind.NEITHER
    return LetterKind.VOWEL if is_vowel(char) else LetterKind.CONSONANT


def count_letters(text: str) -> tuple[int, int]:
    """Numbers of vowels and consonants in ``text``."""
    letters = [char for char in text if _is_letter(char)]
    vowels = sum(1 for char in letters if is_vowel(char))
    return vowels, len(letters) - vowels


def average(numbers: Iterable[float]) -> float:
    """Arithmetic mean of the numbers."""
    numbers = list(numbers)
    if not numbers:
        raise ValueError("cannot average an empty collection")
    return sum(numbers) / len(numbers)