"""Plan a metro trip: find the line serving a station, the arrival time and the fare."""

from __future__ import annotations

import math
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

SERVICE_START_HOUR = 6


def _c_mod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend (truncating division)."""
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _c_div(a: int, b: int) -> int:
    """Quotient truncated towards zero."""
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


@dataclass
class Line:
    """A metro line with its stations in both directions.

    Each station is a ``(ride_time, name)`` pair, the ride time being the
    minutes from the previous stop.
    """

    name: str
    wait_minutes: int
    towards_start: list[tuple[int, str]] = field(default_factory=list)
    towards_end: list[tuple[int, str]] = field(default_factory=list)

    @property
    def stations(self) -> list[tuple[int, str]]:
        return self.towards_start + self.towards_end


@dataclass(frozen=True)
class TripPlan:
    """The outcome of planning a trip."""

    direction: str
    line: str
    stations: int
    arrival_minutes: int
    cost: int

    @property
    def arrival(self) -> tuple[int, int]:
        """Arrival as ``(hour, minute)``."""
        return (
            SERVICE_START_HOUR + _c_div(self.arrival_minutes, 60),
            _c_mod(self.arrival_minutes, 60),
        )


def parse_time(text: str) -> tuple[int, ...]:
    """Split a colon separated time such as ``"7:05"`` into integers."""
    return tuple(int(part) for part in text.split(":"))


def arrival_time_of_train(wait_minutes: int, current_time: Sequence[int]) -> int:
    """Minutes after the start of service at which the next train leaves."""
    if len(current_time) < 2:
        raise ValueError("time needs an hour and a minute")
    hour, minute = current_time[0], current_time[1]
    now = (hour - SERVICE_START_HOUR) * 60 + minute
    remainder = _c_mod(now, wait_minutes)
    if remainder == 0:
        return now
    return now + (wait_minutes - remainder)


def trip_cost(num_stations: int) -> int:
    """Fare for a trip passing the given number of stations."""
    return math.ceil(1000 * math.log10(10 * num_stations))


def _take(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def _read_stations(tokens: Iterator[str]) -> list[tuple[int, str]]:
    count = int(_take(tokens))
    stations = []
    for _ in range(count):
        ride_time = int(_take(tokens))
        stations.append((ride_time, _take(tokens)))
    return stations


def parse_network(text: str) -> tuple[list[Line], tuple[int, ...], str]:
    """Parse the whitespace separated network description.

    Returns the lines, the starting time and the destination station.
    """
    tokens = iter(text.split())
    num_lines = int(_take(tokens))
    start_time = parse_time(_take(tokens))
    lines = []
    for _ in range(num_lines):
        name = _take(tokens)
        wait = int(_take(tokens))
        towards_start = _read_stations(tokens)
        towards_end = _read_stations(tokens)
        lines.append(Line(name, wait, towards_start, towards_end))
    destination = _take(tokens)
    return lines, start_time, destination


def plan_trip(lines: Sequence[Line], start_time: Sequence[int], destination: str) -> TripPlan:
    """Plan a trip to ``destination``; the last matching station wins.

    Ride times of every matching station are accumulated, as the
    original planner does.
    """
    ride_time = 0
    plan = None
    for line in lines:
        split = len(line.towards_start)
        for index, (_, name) in enumerate(line.stations):
            if name != destination:
                continue
            if index < split:
                passed = line.towards_start[: index + 1]
                direction = "start"
            else:
                passed = line.towards_end[: index - split + 1]
                direction = "end"
            ride_time += sum(minutes for minutes, _ in passed)
            plan = TripPlan(
                direction=direction,
                line=line.name,
                stations=len(passed),
                arrival_minutes=ride_time + arrival_time_of_train(line.wait_minutes, start_time),
                cost=trip_cost(len(passed)),
            )
    if plan is None:
        raise ValueError(f"no line serves station {destination!r}")
    return plan


def format_plan(plan: TripPlan) -> str:
    """Render a plan as the three output lines."""
    hour, minute = plan.arrival
    return (
        f"Towards {plan.direction} of {plan.line} in {plan.stations} station(s)\n"
        f"{hour}:{minute}\n"
        f"{plan.cost}"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Read a network from standard input and print the trip plan."""
    try:
        lines, start_time, destination = parse_network(sys.stdin.read())
        plan = plan_trip(lines, start_time, destination)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(format_plan(plan))
    return 0


if __name__ == "__main__":
    sys.exit(main())