import itertools

import pytest

from handycalc.classify import (
    GradeReport,
    LetterKind,
    age,
    average,
    count_letters,
    days_in_month,
    grade_report,
    is_even,
    is_leap_year,
    is_vowel,
    largest,
    letter_grade,
    letter_kind,
    smallest,
    weather_advice,
)


@pytest.mark.parametrize("birth, current", [(1990, 2024), (2024, 2024), (1950, 2000)])
def test_age_adds_back_to_current_year(birth, current):
    assert age(birth, current) + birth == current


@pytest.mark.parametrize("month", [1, 3, 5, 7, 8, 10, 12])
def test_long_months(month):
    assert days_in_month(month) == (31,)


@pytest.mark.parametrize("month", [4, 6, 9, 11])
def test_short_months(month):
    assert days_in_month(month) == (30,)


def test_february():
    assert days_in_month(2) == (28, 29)


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month(month):
    with pytest.raises(ValueError):
        days_in_month(month)


def test_grade_report_full_marks():
    report = grade_report([100] * 5)
    assert isinstance(report, GradeReport)
    assert report.total == 500
    assert report.achieved == 500
    assert report.percentage == 100
    assert report.division == "distinction"
    assert not report.failed
    assert report.passed


@pytest.mark.parametrize(
    "mark, division",
    [(70, "first class"), (60, "first class"), (55, "second class"), (30, "third class")],
)
def test_grade_report_divisions(mark, division):
    report = grade_report([mark] * 5)
    assert report.percentage == pytest.approx(mark)
    assert report.division == division


def test_exactly_75_percent_falls_to_third_class():
    assert grade_report([75] * 5).division == "third class"


def test_failing_marks_flags():
    report = grade_report([30] * 5)
    assert report.failed
    assert not report.passed


def test_mixed_marks_can_be_failed_and_passed():
    report = grade_report([30, 50, 50, 50, 50])
    assert report.failed and report.passed


def test_marks_over_100_rejected():
    with pytest.raises(ValueError):
        grade_report([100, 100, 101, 100, 100])


def test_empty_marks_rejected():
    with pytest.raises(ValueError):
        grade_report([])


@pytest.mark.parametrize(
    "marks, grade",
    [
        (100, "A+"),
        (90, "A+"),
        (89, "A"),
        (80, "A"),
        (79, "B+"),
        (70, "B+"),
        (60, "B"),
        (50, "C+"),
        (40, "C"),
        (39, "D"),
        (35, "D"),
        (34, "F"),
        (0, "F"),
    ],
)
def test_letter_grade(marks, grade):
    assert letter_grade(marks) == grade


@pytest.mark.parametrize("marks", [-1, 101])
def test_letter_grade_out_of_range(marks):
    with pytest.raises(ValueError):
        letter_grade(marks)


@pytest.mark.parametrize("number", range(-5, 6))
def test_parity_alternates(number):
    assert is_even(number) != is_even(number + 1)


def test_zero_is_even():
    assert is_even(0)


@pytest.mark.parametrize("year, leap", [(2024, True), (2000, True), (1900, False), (2023, False)])
def test_leap_years(year, leap):
    assert is_leap_year(year) is leap


@pytest.mark.parametrize("year", [0, -4])
def test_non_positive_year_rejected(year):
    with pytest.raises(ValueError):
        is_leap_year(year)


@pytest.mark.parametrize("values", list(itertools.permutations((1, 2, 3))))
def test_smallest_and_largest_any_order(values):
    assert smallest(*values) == 1
    assert largest(*values) == 3


def test_ties():
    assert smallest(4, 4, 9) == 4
    assert largest(7, 7, 2) == 7


@pytest.mark.parametrize(
    "temperature, advice",
    [
        (41, "It's extremely hot outside. Stay hydrated and avoid direct sunlight."),
        (40, "It's hot today. Wear light clothes and drink plenty of water."),
        (25, "The weather is warm and pleasant."),
        (15, "It's a bit cool. You might need a light jacket."),
        (5, "It's cold outside. Wear warm clothes."),
        (0, "It's freezing! Stay indoors and keep warm."),
        (-10, "It's freezing! Stay indoors and keep warm."),
    ],
)
def test_weather_advice(temperature, advice):
    assert weather_advice(temperature) == advice


@pytest.mark.parametrize("char, vowel", [("a", True), ("E", True), ("u", True), ("b", False), ("Z", False)])
def test_is_vowel(char, vowel):
    assert is_vowel(char) is vowel


@pytest.mark.parametrize(
    "char, kind",
    [
        ("a", LetterKind.VOWEL),
        ("O", LetterKind.VOWEL),
        ("z", LetterKind.CONSONANT),
        ("7", LetterKind.NEITHER),
        (" ", LetterKind.NEITHER),
        ("é", LetterKind.NEITHER),
    ],
)
def test_letter_kind(char, kind):
    assert letter_kind(char) is kind


@pytest.mark.parametrize("text", ["", "ab"])
def test_letter_kind_needs_one_character(text):
    with pytest.raises(ValueError):
        letter_kind(text)


def test_count_letters_only_vowels():
    assert count_letters("aeiou") == (5, 0)


def test_count_letters_ignores_non_letters():
    assert count_letters("xyz 123!") == (0, 3)


def test_count_letters_total_matches_letter_count():
    text = "Hello, World 42"
    vowels, consonants = count_letters(text)
    assert vowels + consonants == sum(ch.isalpha() for ch in text)


def test_average_of_equal_numbers():
    assert average([5, 5, 5]) == 5


def test_average_lies_between_extremes():
    numbers = [1.5, 9.0, 3.25, 7.0]
    assert min(numbers) <= average(numbers) <= max(numbers)


def test_average_of_empty_rejected():
    with pytest.raises(ValueError):
        average([])