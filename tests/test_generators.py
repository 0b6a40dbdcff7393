import random
from datetime import date

import pytest

import showcase


# ---------------------------------------------------------------------------
# Fibonacci
# ---------------------------------------------------------------------------


def test_fibonacci_first_five_terms():
    assert list(showcase.FibonacciSequence(5)) == [0, 1, 1, 2, 3]


@pytest.mark.parametrize("count", [0, 1, 2, 15, 40])
def test_fibonacci_length_and_recurrence(count):
    terms = list(showcase.FibonacciSequence(count))
    assert len(terms) == count
    if count >= 1:
        assert terms[0] == 0
    if count >= 2:
        assert terms[1] == 1
    for k in range(2, count):
        assert terms[k] == terms[k - 1] + terms[k - 2]


def test_fibonacci_is_restartable():
    seq = showcase.FibonacciSequence(8)
    assert list(seq) == list(seq)
    assert len(seq) == 8


def test_fibonacci_rejects_negative_count():
    with pytest.raises(ValueError, match="count"):
        showcase.FibonacciSequence(-1)


def test_format_fibonacci_joins_with_arrows():
    line = showcase.format_fibonacci(showcase.FibonacciSequence(6))
    assert line == "0 → 1 → 1 → 2 → 3 → 5"


# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------


def test_forecast_is_reproducible_for_a_seed():
    today = date(2026, 10, 18)
    first = showcase.generate_forecast(7, rng=random.Random(42), today=today)
    second = showcase.generate_forecast(7, rng=random.Random(42), today=today)
    assert first == second
    assert showcase.format_forecast(first) == showcase.format_forecast(second)


def test_forecast_shape_and_ranges(rng):
    today = date(2026, 12, 30)
    forecast = showcase.generate_forecast(5, rng=rng, today=today)

    assert [entry.day for entry in forecast] == [
        date(2026, 12, 30),
        date(2026, 12, 31),
        date(2027, 1, 1),
        date(2027, 1, 2),
        date(2027, 1, 3),
    ]
    for entry in forecast:
        assert entry.condition in showcase.WEATHER_CONDITIONS
        assert showcase.TEMPERATURE_MIN <= entry.temperature <= showcase.TEMPERATURE_MAX


def test_forecast_zero_days_is_empty(rng):
    assert showcase.generate_forecast(0, rng=rng, today=date(2026, 1, 1)) == []


def test_forecast_rejects_negative_days(rng):
    with pytest.raises(ValueError, match="days"):
        showcase.generate_forecast(-3, rng=rng, today=date(2026, 1, 1))


def test_format_forecast_line():
    entry = showcase.DayForecast(day=date(2026, 10, 18), condition="sunny", temperature=25)
    emoji = showcase._WEATHER_EMOJI["sunny"]
    assert showcase.format_forecast([entry]) == [f"Sunday, October 18: {emoji} Sunny 25°C"]


# ---------------------------------------------------------------------------
# Sales
# ---------------------------------------------------------------------------


def test_sales_report_statistics(rng):
    report = showcase.generate_sales_report(rng=rng)

    assert [month for month, _ in report.sales] == list(showcase.MONTHS)
    values = [amount for _, amount in report.sales]
    assert all(showcase.SALES_MIN <= v <= showcase.SALES_MAX for v in values)
    assert report.total == sum(values)
    assert report.average == report.total // 12
    assert report.amount(report.best_month) == max(values)
    assert report.amount(report.worst_month) == min(values)


def test_summarize_sales_breaks_ties_by_first_month():
    report = showcase.summarize_sales({"Jan": 5, "Feb": 9, "Mar": 9, "Apr": 1, "May": 1})
    assert report.best_month == "Feb"
    assert report.worst_month == "Apr"
    assert report.total == 25
    assert report.average == 5


def test_summarize_sales_rejects_empty():
    with pytest.raises(ValueError):
        showcase.summarize_sales({})


def test_format_sales_report_bars_and_dollars():
    report = showcase.summarize_sales({"Jan": 1234, "Feb": 5000})
    lines = showcase.format_sales_report(report)

    assert lines[0] == "Monthly Sales Data:"
    assert lines[1] == "Jan: " + "█" * 12 + " $1,234"
    assert lines[2] == "Feb: " + "█" * 50 + " $5,000"
    assert "Total Sales: $6,234" in lines
    assert "Average: $3,117" in lines
    assert "Best Month: Feb ($5,000)" in lines
    assert "Worst Month: Jan ($1,234)" in lines


# ---------------------------------------------------------------------------
# Pattern
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(("width", "height"), [(0, 0), (0, 5), (5, 0)])
def test_pattern_empty_for_zero_dimension(width, height):
    assert showcase.generate_pattern(width, height) == []


def test_pattern_shape_and_glyphs():
    rows = showcase.generate_pattern(35, 8)
    assert len(rows) == 8
    for row in rows:
        assert len(row) == 35
        assert set(row) <= set(showcase.PATTERN_GLYPHS)


def test_pattern_known_cells():
    row = showcase.generate_pattern(16, 1)[0]
    assert row[0] == "▒"  # sin(0) == 0
    assert row[1] == "░"
    assert row[5] == "·"
    assert row[10] == "▒"
    assert row[12] == "▓"
    assert row[13] == "█"
    assert row[15] == "█"


def test_pattern_rejects_negative_dimensions():
    with pytest.raises(ValueError, match="width"):
        showcase.generate_pattern(-1, 3)
    with pytest.raises(ValueError, match="height"):
        showcase.generate_pattern(3, -1)


# ---------------------------------------------------------------------------
# Story
# ---------------------------------------------------------------------------

_VOCABULARIES = {
    "character": showcase.CHARACTERS,
    "location": showcase.LOCATIONS,
    "item": showcase.ITEMS,
    "antagonist": showcase.ANTAGONISTS,
    "action": showcase.ACTIONS,
}


@pytest.mark.parametrize("seed", range(10))
def test_story_uses_one_entry_per_vocabulary(seed):
    story = showcase.generate_story(rng=random.Random(seed))
    text = story.render()

    for slot, vocabulary in _VOCABULARIES.items():
        assert getattr(story, slot) in vocabulary
        present = [entry for entry in vocabulary if entry in text]
        assert present == [getattr(story, slot)]


def test_story_fills_template_slots(rng):
    story = showcase.generate_story(rng=rng)
    text = story.render()

    assert text.startswith(story.title + "\n\n")
    assert f"a {story.character} ventured into the {story.location}." in text
    assert f"they {story.action} a {story.antagonist} who guarded" in text
    assert f"the legendary {story.item}." in text


def test_story_title_uses_last_word_of_item():
    story = showcase.Story(
        character="wise wizard",
        location="hidden cave",
        item="mysterious key",
        antagonist="goblin king",
        action="outsmarted",
    )
    assert story.title == "The Tale of the Key"


def test_sales_report_is_hashable_and_immutable():
    report = showcase.summarize_sales({"Jan": 1200, "Feb": 3400})
    twin = showcase.summarize_sales({"Jan": 1200, "Feb": 3400})

    assert hash(report) == hash(twin)
    assert report.sales == (("Jan", 1200), ("Feb", 3400))
    assert report.amount("Feb") == 3400
    with pytest.raises(AttributeError):
        report.total = 0
