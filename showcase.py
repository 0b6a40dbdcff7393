#!/usr/bin/env python3
"""Terminal Showcase: a colorful tour of tiny generators.

A single-file, zero-dependency CLI that prints a banner, a fibonacci
run, a few magical creatures, a weather forecast, an ASCII pattern, a
battery-powered robot, a sales chart and a short adventure story.

Every generator draws from an injected ``random.Random`` and an injected
clock, so a fixed seed and timestamp reproduce the whole tour.

Usage:
    python showcase.py
"""

from __future__ import annotations

import argparse
import logging
import math
import os
import platform
import random
import sys
import uuid
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import TextIO

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_VERSION = "1.0.0"

EXIT_SUCCESS = 0

FIBONACCI_TERMS: int = 15
FORECAST_DAYS: int = 5
PATTERN_WIDTH: int = 35
PATTERN_HEIGHT: int = 8
RULE_WIDTH: int = 60

_BANNER_WIDTH: int = 62
_SESSION_ID_LENGTH: int = 8

# ---------------------------------------------------------------------------
# ANSI formatting
# ---------------------------------------------------------------------------

_SUPPORTS_COLOR: bool = hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

_ANSI_RESET: str = "\033[0m"
_ANSI_BOLD: str = "\033[1m"
_ANSI_RED: str = "\033[31m"
_ANSI_GREEN: str = "\033[32m"
_ANSI_YELLOW: str = "\033[33m"
_ANSI_BLUE: str = "\033[34m"
_ANSI_MAGENTA: str = "\033[35m"
_ANSI_CYAN: str = "\033[36m"


def colorize(text: str, code: str) -> str:
    """Wrap text in an ANSI escape code when the terminal supports it."""
    if not _SUPPORTS_COLOR:
        return text
    return f"{code}{text}{_ANSI_RESET}"


def _bold(text: str) -> str:
    return colorize(text, _ANSI_BOLD)


def _red(text: str) -> str:
    return colorize(text, _ANSI_RED)


def _green(text: str) -> str:
    return colorize(text, _ANSI_GREEN)


def _yellow(text: str) -> str:
    return colorize(text, _ANSI_YELLOW)


def _blue(text: str) -> str:
    return colorize(text, _ANSI_BLUE)


def _magenta(text: str) -> str:
    return colorize(text, _ANSI_MAGENTA)


def _cyan(text: str) -> str:
    return colorize(text, _ANSI_CYAN)


def _heading(title: str) -> str:
    """Return a bold section heading preceded by a blank line."""
    return _bold(f"\n{title}")


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

logger: logging.Logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def _require_non_negative(name: str, value: int) -> None:
    """Raise ValueError when a count or dimension is negative."""
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


# ---------------------------------------------------------------------------
# Banner and session header
# ---------------------------------------------------------------------------

_BANNER_TITLE = "~ PYTHON SHOWCASE ~"
_BANNER_TAGLINE = "Small generators, printed with care"


def format_banner() -> str:
    """Render the opening box-drawing banner."""
    inner = _BANNER_WIDTH
    lines = [
        "╔" + "═" * inner + "╗",
        "║" + _BANNER_TITLE.center(inner) + "║",
        "║" + " " * inner + "║",
        "║" + _BANNER_TAGLINE.center(inner) + "║",
        "╚" + "═" * inner + "╝",
    ]
    return "\n".join(_bold(_cyan(line)) for line in lines)


def session_id(rng: random.Random) -> str:
    """Return a short session id drawn from the given random source."""
    token = uuid.UUID(int=rng.getrandbits(128), version=4)
    return str(token)[:_SESSION_ID_LENGTH]


def format_session_header(now: datetime, *, rng: random.Random) -> list[str]:
    """Describe the current time, interpreter and session."""
    stamp = now.strftime("%A, %B %d, %Y at %I:%M:%S %p")
    return [
        _blue(f"\U0001f552 Current Time: {stamp}"),
        _green(f"\U0001f40d Python Version: {platform.python_version()}"),
        _yellow(f"\U0001f194 Session ID: {session_id(rng)}"),
    ]


# ---------------------------------------------------------------------------
# Fibonacci
# ---------------------------------------------------------------------------


class FibonacciSequence:
    """A lazy, finite run of fibonacci numbers.

    Each call to ``iter()`` starts again from 0 and 1, so the same
    instance can be walked as many times as needed.

    Args:
        count: Number of terms to produce.

    Raises:
        ValueError: If ``count`` is negative.

    """

    def __init__(self, count: int) -> None:
        _require_non_negative("count", count)
        self._count = count

    def __iter__(self) -> Iterator[int]:
        a, b = 0, 1
        for _ in range(self._count):
            yield a
            a, b = b, a + b

    def __len__(self) -> int:
        return self._count


def format_fibonacci(terms: FibonacciSequence) -> str:
    """Join the terms with arrows, alternating cyan and magenta."""
    return " → ".join(
        _cyan(str(n)) if i % 2 == 0 else _magenta(str(n)) for i, n in enumerate(terms)
    )


# ---------------------------------------------------------------------------
# Magical creatures
# ---------------------------------------------------------------------------

_POWER_MIN: int = 1
_POWER_MAX: int = 100

SPELLS: tuple[str, ...] = (
    "✨ casts Sparkling Shield",
    "\U0001f525 unleashes Flame of Wisdom",
    "❄️ conjures Frost of Clarity",
    "⚡ summons Lightning of Inspiration",
    "\U0001f33f grows Vines of Harmony",
)

_CREATURE_ROSTER: tuple[tuple[str, str, tuple[str, ...]], ...] = (
    ("Sparkle", "Unicorn", ("Healing Light", "Rainbow Bridge", "Purification")),
    ("Shadowmere", "Dragon", ("Fire Breath", "Flight", "Telepathy")),
    ("Whisperwind", "Phoenix", ("Rebirth", "Flame Control", "Prophecy")),
)

_SPELL_TARGET = "the ancient evil"


@dataclass(frozen=True, slots=True)
class MagicalCreature:
    """A named creature with a sampled power level."""

    name: str
    kind: str
    power_level: int
    abilities: tuple[str, ...]
    born: datetime

    def introduce(self) -> str:
        """Render a four-line introduction card."""
        abilities = ", ".join(_cyan(a) for a in self.abilities)
        badge = f"\U0001f31f {self.name}"
        lines = [
            f"{_magenta(badge)} the {_yellow(self.kind)}",
            f"Power Level: {_green(str(self.power_level))}",
            f"Abilities: {abilities}",
            f"Born: {self.born.strftime('%Y-%m-%d at %H:%M:%S')}",
        ]
        return "\n".join(lines)

    def cast_spell(self, target: str = "the darkness", *, rng: random.Random) -> str:
        """Pick a spell at random and describe it hitting the target."""
        spell = rng.choice(SPELLS)
        return f"{_magenta(self.name)} {spell} against {target}!"


def summon_creature(
    name: str,
    kind: str,
    abilities: Sequence[str],
    *,
    rng: random.Random,
    born: datetime,
) -> MagicalCreature:
    """Create a creature whose power level is drawn from ``rng``."""
    power = rng.randint(_POWER_MIN, _POWER_MAX)
    logger.debug("Summoned %s the %s at power %d", name, kind, power)
    return MagicalCreature(
        name=name,
        kind=kind,
        power_level=power,
        abilities=tuple(abilities),
        born=born,
    )


# ---------------------------------------------------------------------------
# Functional demo
# ---------------------------------------------------------------------------


def functional_demo() -> list[str]:
    """Show a comprehension, a lambda and a recursive closure at work."""
    squares = [n**2 for n in range(1, 6)]
    multiply = lambda x, factor: x * factor  # noqa: E731

    def factorial(n: int) -> int:
        return 1 if n <= 1 else n * factorial(n - 1)

    return [
        f"Squares: {', '.join(str(s) for s in squares)}",
        f"Using a lambda - 5 * 3 = {multiply(5, 3)}",
        f"Factorial of 5: {factorial(5)}",
    ]


# ---------------------------------------------------------------------------
# Weather
# ---------------------------------------------------------------------------

WEATHER_CONDITIONS: tuple[str, ...] = (
    "sunny",
    "rainy",
    "cloudy",
    "stormy",
    "snowy",
    "foggy",
    "windy",
)

_WEATHER_EMOJI: dict[str, str] = {
    "sunny": "☀️",
    "rainy": "\U0001f327️",
    "cloudy": "☁️",
    "stormy": "⛈️",
    "snowy": "❄️",
    "foggy": "\U0001f32b️",
    "windy": "\U0001f4a8",
}

TEMPERATURE_MIN: int = -10
TEMPERATURE_MAX: int = 35

_HOT_THRESHOLD: int = 20
_MILD_THRESHOLD: int = 10


@dataclass(frozen=True, slots=True)
class DayForecast:
    """Weather for a single calendar day."""

    day: date
    condition: str
    temperature: int  # degrees Celsius


def generate_forecast(
    days: int,
    *,
    rng: random.Random,
    today: date,
) -> list[DayForecast]:
    """Sample one condition and temperature per day, starting at ``today``.

    Args:
        days: Number of consecutive days to forecast.
        rng: Random source for conditions and temperatures.
        today: Date of the first forecast entry.

    Returns:
        One DayForecast per day, in date order. Empty when ``days`` is 0.

    Raises:
        ValueError: If ``days`` is negative.

    """
    _require_non_negative("days", days)
    forecast = [
        DayForecast(
            day=today + timedelta(days=offset),
            condition=rng.choice(WEATHER_CONDITIONS),
            temperature=rng.randint(TEMPERATURE_MIN, TEMPERATURE_MAX),
        )
        for offset in range(days)
    ]
    logger.debug("Generated %d-day forecast from %s", days, today.isoformat())
    return forecast


def _temperature_color(temperature: int) -> Callable[[str], str]:
    if temperature > _HOT_THRESHOLD:
        return _red
    if temperature > _MILD_THRESHOLD:
        return _yellow
    return _blue


def format_forecast(forecast: Sequence[DayForecast]) -> list[str]:
    """Render one line per forecast day."""
    lines: list[str] = []
    for entry in forecast:
        paint = _temperature_color(entry.temperature)
        lines.append(
            f"{entry.day.strftime('%A, %B %d')}: "
            f"{_WEATHER_EMOJI[entry.condition]} {entry.condition.capitalize()} "
            f"{paint(f'{entry.temperature}°C')}"
        )
    return lines


# ---------------------------------------------------------------------------
# ASCII pattern
# ---------------------------------------------------------------------------

# Inclusive value ranges, checked in order; anything outside falls back.
_PATTERN_BUCKETS: tuple[tuple[int, int, str], ...] = (
    (-10, -5, "█"),
    (-4, -1, "▓"),
    (0, 1, "▒"),
    (2, 4, "░"),
)
_PATTERN_FALLBACK: str = "·"

PATTERN_GLYPHS: tuple[str, ...] = (
    *(glyph for _, _, glyph in _PATTERN_BUCKETS),
    _PATTERN_FALLBACK,
)

_GLYPH_COLORS: dict[str, Callable[[str], str]] = {
    "█": _blue,
    "▓": _cyan,
    "▒": _green,
    "░": _yellow,
    _PATTERN_FALLBACK: _red,
}


def _pattern_value(x: int, y: int) -> int:
    # int() truncates toward zero, so the value stays within -10..10.
    return int(math.sin(x * 0.3) * math.cos(y * 0.2) * 10)


def _pattern_glyph(value: int) -> str:
    for low, high, glyph in _PATTERN_BUCKETS:
        if low <= value <= high:
            return glyph
    return _PATTERN_FALLBACK


def generate_pattern(width: int, height: int) -> list[str]:
    """Build a ``height`` x ``width`` grid of glyphs from a wave function.

    Raises:
        ValueError: If either dimension is negative.

    """
    _require_non_negative("width", width)
    _require_non_negative("height", height)
    if width == 0:
        return []
    return [
        "".join(_pattern_glyph(_pattern_value(x, y)) for x in range(width))
        for y in range(height)
    ]


def format_pattern(rows: Sequence[str]) -> list[str]:
    """Color each glyph of an already generated pattern."""
    return ["".join(_GLYPH_COLORS[glyph](glyph) for glyph in row) for row in rows]


# ---------------------------------------------------------------------------
# Robot
# ---------------------------------------------------------------------------

_FULL_BATTERY: int = 100
_LOW_BATTERY: int = 10
_ACTION_COST: int = 10

ROBOT_CAPABILITIES: tuple[str, ...] = (
    "scan_environment",
    "collect_data",
    "analyze_patterns",
)


def _drain(battery_level: int) -> int:
    """Battery left after one standard action."""
    return battery_level - _ACTION_COST


@dataclass
class Robot:
    """A robot whose capabilities each spend part of a shared battery."""

    name: str
    model: str
    capabilities: dict[str, Callable[[int], int]] = field(default_factory=dict)
    battery_level: int = _FULL_BATTERY

    def perform(self, capability: str) -> str:
        """Run a capability and report the remaining battery.

        Raises:
            ValueError: If the robot has no such capability.

        """
        try:
            action = self.capabilities[capability]
        except KeyError:
            msg = f"{self.name} has no capability {capability!r}"
            raise ValueError(msg) from None

        if self.battery_level <= _LOW_BATTERY:
            logger.debug(
                "%s refused %s at %d%%", self.name, capability, self.battery_level
            )
            return f"⚠️ {self.name} needs charging! Battery too low."

        self.battery_level = action(self.battery_level)
        return (
            f"\U0001f916 {self.name} executing {capability}... "
            f"Battery: {self.battery_level}%"
        )

    def status(self) -> str:
        """One-line summary of the robot and its capabilities."""
        return (
            f"Robot {self.name} ({self.model}) - Battery: {self.battery_level}% "
            f"- Functions: {', '.join(self.capabilities)}"
        )


def build_robot(name: str, model: str, capabilities: Sequence[str]) -> Robot:
    """Create a fully charged robot with the named capabilities."""
    return Robot(
        name=name,
        model=model,
        capabilities={capability: _drain for capability in capabilities},
    )


# ---------------------------------------------------------------------------
# Sales statistics
# ---------------------------------------------------------------------------

MONTHS: tuple[str, ...] = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

SALES_MIN: int = 1000
SALES_MAX: int = 5000

_BAR_UNIT: int = 100
_BAR_MAX: int = 50
_STRONG_SALES: int = 3500
_STEADY_SALES: int = 2500


@dataclass(frozen=True, slots=True)
class SalesReport:
    """Monthly sales figures with statistics derived once at build time."""

    sales: tuple[tuple[str, int], ...]  # (month, amount) in calendar order
    total: int
    average: int
    best_month: str
    worst_month: str

    def amount(self, month: str) -> int:
        """Sales figure recorded for ``month``."""
        return dict(self.sales)[month]


def summarize_sales(sales: Mapping[str, int]) -> SalesReport:
    """Compute total, truncated mean and best/worst months.

    Ties resolve to the first month in iteration order.

    Raises:
        ValueError: If ``sales`` is empty.

    """
    if not sales:
        msg = "sales must contain at least one month"
        raise ValueError(msg)
    figures = dict(sales)
    total = sum(figures.values())
    return SalesReport(
        sales=tuple(figures.items()),
        total=total,
        average=total // len(figures),
        best_month=max(figures, key=figures.__getitem__),
        worst_month=min(figures, key=figures.__getitem__),
    )


def generate_sales_report(*, rng: random.Random) -> SalesReport:
    """Sample one figure per calendar month and summarize them."""
    sales = {month: rng.randint(SALES_MIN, SALES_MAX) for month in MONTHS}
    report = summarize_sales(sales)
    logger.debug("Sales total %d, best %s", report.total, report.best_month)
    return report


def _dollars(amount: int) -> str:
    return f"${amount:,}"


def _sales_color(amount: int) -> Callable[[str], str]:
    if amount > _STRONG_SALES:
        return _green
    if amount > _STEADY_SALES:
        return _yellow
    return _red


def format_sales_report(report: SalesReport) -> list[str]:
    """Render a bar chart followed by the statistics block."""
    lines = ["Monthly Sales Data:"]
    for month, amount in report.sales:
        bar = "█" * min(amount // _BAR_UNIT, _BAR_MAX)
        lines.append(f"{month}: {_sales_color(amount)(bar)} {_dollars(amount)}")

    best = report.amount(report.best_month)
    worst = report.amount(report.worst_month)
    lines.extend(
        [
            "",
            "\U0001f4c8 Statistics:",
            f"Total Sales: {_dollars(report.total)}",
            f"Average: {_dollars(report.average)}",
            f"Best Month: {_green(report.best_month)} ({_dollars(best)})",
            f"Worst Month: {_red(report.worst_month)} ({_dollars(worst)})",
        ]
    )
    return lines


# ---------------------------------------------------------------------------
# Story
# ---------------------------------------------------------------------------

CHARACTERS: tuple[str, ...] = (
    "brave knight",
    "wise wizard",
    "cunning thief",
    "noble princess",
    "young alchemist",
)

LOCATIONS: tuple[str, ...] = (
    "enchanted forest",
    "mystical castle",
    "hidden cave",
    "floating island",
    "underground city",
)

ITEMS: tuple[str, ...] = (
    "golden sword",
    "magic crystal",
    "ancient scroll",
    "silver amulet",
    "mysterious key",
)

ANTAGONISTS: tuple[str, ...] = (
    "ancient dragon",
    "shadow sorcerer",
    "stone golem",
    "goblin king",
    "sea serpent",
)

ACTIONS: tuple[str, ...] = (
    "discovered",
    "fought against",
    "befriended",
    "outsmarted",
    "rescued",
)

_STORY_TEMPLATE = (
    "Once upon a time, a {character} ventured into the {location}.\n"
    "Deep within this mysterious place, they {action} a {antagonist} who guarded\n"
    "the legendary {item}.\n"
    "\n"
    "After an epic encounter, our hero emerged victorious and the {item} now glows with\n"
    "{glow}, ready for the next adventure!"
)


@dataclass(frozen=True, slots=True)
class Story:
    """The five sampled ingredients of a short adventure."""

    character: str
    location: str
    item: str
    antagonist: str
    action: str

    @property
    def title(self) -> str:
        """Headline built from the last word of the item."""
        return f"The Tale of the {self.item.split()[-1].capitalize()}"

    def render(self) -> str:
        """Fill the narrative template, title first."""
        body = _STORY_TEMPLATE.format(
            character=_cyan(self.character),
            location=_green(self.location),
            action=self.action,
            antagonist=_red(self.antagonist),
            item=_yellow(self.item),
            glow=_magenta("magical power"),
        )
        return f"{_magenta(self.title)}\n\n{body}"


def generate_story(*, rng: random.Random) -> Story:
    """Draw one entry from each story vocabulary."""
    return Story(
        character=rng.choice(CHARACTERS),
        location=rng.choice(LOCATIONS),
        item=rng.choice(ITEMS),
        antagonist=rng.choice(ANTAGONISTS),
        action=rng.choice(ACTIONS),
    )


# ---------------------------------------------------------------------------
# Trivia and closing
# ---------------------------------------------------------------------------

PYTHON_FACTS: tuple[str, ...] = (
    "Python was created by Guido van Rossum and first released in 1991",
    "Python is named after Monty Python, not the snake",
    "Everything in Python is an object, even functions and modules",
    "Python supports procedural, object-oriented and functional styles",
    "Try 'import this' to read The Zen of Python",
)


def pick_fact(rng: random.Random) -> str:
    """Return one Python fact chosen by ``rng``."""
    return rng.choice(PYTHON_FACTS)


def format_closing() -> list[str]:
    """Closing rule and farewell lines."""
    rule = "=" * RULE_WIDTH
    return [
        _magenta(f"\n{rule}"),
        _bold("Thanks for exploring Python with us! \U0001f40d✨"),
        _green("Python makes programming a joy! \U0001f389"),
        _magenta(rule),
    ]


# ---------------------------------------------------------------------------
# Driver
# ---------------------------------------------------------------------------


def run_showcase(
    *,
    rng: random.Random,
    now: datetime,
    out: TextIO | None = None,
) -> None:
    """Print every section of the showcase, in order, to ``out``.

    Args:
        rng: Random source shared by every generator.
        now: Moment used for the header, creature birthdays and forecast.
        out: Destination stream. Uses ``sys.stdout`` when None.

    """
    stream = out if out is not None else sys.stdout

    def emit(text: str = "") -> None:
        stream.write(text + "\n")

    emit(format_banner())
    for line in format_session_header(now, rng=rng):
        emit(line)

    emit(_heading(f"\U0001f522 Fibonacci Sequence (first {FIBONACCI_TERMS} numbers):"))
    emit(format_fibonacci(FibonacciSequence(FIBONACCI_TERMS)))

    emit(_heading("\U0001f9d9 Magical Creatures Assembly:"))
    for name, kind, abilities in _CREATURE_ROSTER:
        creature = summon_creature(name, kind, abilities, rng=rng, born=now)
        emit(creature.introduce())
        emit(creature.cast_spell(_SPELL_TARGET, rng=rng))
        emit()

    emit(_heading("\U0001f4e6 Comprehension, Lambda, and Closure Demonstration:"))
    for line in functional_demo():
        emit(line)

    emit(_heading("\U0001f324️  Weather Forecast:"))
    forecast = generate_forecast(FORECAST_DAYS, rng=rng, today=now.date())
    for line in format_forecast(forecast):
        emit(line)

    emit(_heading("\U0001f3a8 Generated ASCII Pattern:"))
    for line in format_pattern(generate_pattern(PATTERN_WIDTH, PATTERN_HEIGHT)):
        emit(line)

    emit(_heading("\U0001f916 Robot Capabilities:"))
    robot = build_robot("Py-Bot", "PY-2026", ROBOT_CAPABILITIES)
    emit(robot.status())
    for capability in ROBOT_CAPABILITIES:
        emit(robot.perform(capability))
    emit(robot.status())

    emit(_heading("\U0001f4ca Data Analysis Demonstration:"))
    for line in format_sales_report(generate_sales_report(rng=rng)):
        emit(line)

    emit(_heading("\U0001f4da Generated Adventure Story:"))
    emit(generate_story(rng=rng).render())

    emit(_heading("\U0001f4a1 Did you know?"))
    emit(_cyan(pick_fact(rng)))

    for line in format_closing():
        emit(line)


# ---------------------------------------------------------------------------
# Terminal helpers
# ---------------------------------------------------------------------------


def _enable_win_vt() -> None:
    """Let Windows consoles interpret the ANSI colour codes used above.

    Does nothing elsewhere; a failed console call is logged at debug level.
    """
    if os.name != "nt":
        return
    try:
        import ctypes  # noqa: PLC0415  # pylint: disable=import-outside-toplevel

        kernel32 = ctypes.windll.kernel32  # type: ignore[attr-defined]
        handle = kernel32.GetStdHandle(-11)
        mode = ctypes.c_ulong()
        kernel32.GetConsoleMode(handle, ctypes.byref(mode))
        # 0x0004 = ENABLE_VIRTUAL_TERMINAL_PROCESSING
        kernel32.SetConsoleMode(handle, mode.value | 0x0004)
    except (ImportError, OSError, ValueError):
        logger.debug("Could not enable virtual-terminal processing")


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------


def _build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="showcase",
        description="Print a colorful tour of small terminal generators.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_VERSION}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the terminal showcase."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    parser = _build_parser()
    parser.parse_args(argv)

    _enable_win_vt()
    rng = random.Random()  # noqa: S311

    try:
        run_showcase(rng=rng, now=datetime.now(), out=sys.stdout)
    except KeyboardInterrupt:
        # Leave the prompt on a fresh line if the tour is cut short.
        sys.stdout.write("\n")

    return EXIT_SUCCESS


if __name__ == "__main__":
    raise SystemExit(main())
