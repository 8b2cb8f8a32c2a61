"""Repair services and how long they take."""

from __future__ import annotations

from dataclasses import dataclass, field


def _russian_plural(value: int, one: str, few: str, many: str) -> str:
    remainder = value % 10
    if remainder == 1:
        return one
    if (value < 10 or value > 20) and 2 <= remainder <= 4:
        return few
    return many


@dataclass
class Duration:
    """A span of time of at most 11 months, 30 days, 24 hours and 60 minutes."""

    months: int = 0
    days: int = 0
    hours: int = 0
    minutes: int = 0

    def __post_init__(self) -> None:
        if min(self.months, self.days, self.hours, self.minutes) < 0 or (
            self.months > 11 or self.days > 30 or self.hours > 24 or self.minutes > 60
        ):
            raise ValueError(
                "You can point out only months <= 11, days <= 30, hours <= 24, minutes <= 60"
            )

    def months_str(self) -> str:
        if self.months == 1:
            word = "месяц"
        elif 2 <= self.months <= 4:
            word = "месяца"
        else:
            word = "месяцев"
        return f"{self.months} {word}"

    def days_str(self) -> str:
        word = _russian_plural(self.days, "день", "дня", "дней")
        return f"{self.days} {word}"

    def hours_str(self) -> str:
        if self.hours in (1, 21):
            word = "час"
        elif 5 <= self.hours <= 20 or self.hours == 0:
            word = "часов"
        else:
            word = "часа"
        return f"{self.hours} {word}"

    def minutes_str(self) -> str:
        word = _russian_plural(self.minutes, "минута", "минуты", "минут")
        return f"{self.minutes} {word}"

    def __str__(self) -> str:
        parts = [
            render()
            for amount, render in (
                (self.months, self.months_str),
                (self.days, self.days_str),
                (self.hours, self.hours_str),
                (self.minutes, self.minutes_str),
            )
            if amount
        ]
        return " ".join(parts) or "Моментально"


@dataclass
class Service:
    """A repair service with its duration and price; ``id`` is set once stored."""

    name: str
    duration: Duration = field(default_factory=Duration)
    price: float = 0.0
    id: int | None = None