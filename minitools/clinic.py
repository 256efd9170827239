"""Book patients with the doctors of the right specialty at the earliest free slot."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field, replace
from functools import cmp_to_key
from operator import attrgetter

WEEKDAYS = ("Sat", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri")
NO_FREE_TIME = "No free time"
SEPARATOR = "----------"
_DAY_WEIGHT = 100000

_INT = re.compile(r"\s*([+-]?\d+)")
_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def _to_int(text: str) -> int:
    """Parse the leading integer of ``text``."""
    match = _INT.match(text)
    if match is None:
        raise ValueError(f"invalid integer {text!r}")
    return int(match.group(1))


def _to_float(text: str) -> float:
    """Parse the leading number of ``text``."""
    match = _FLOAT.match(text)
    if match is None:
        raise ValueError(f"invalid number {text!r}")
    return float(match.group(1))


def _fields(text: str, separator: str) -> list[str]:
    """Split ``text``; a trailing empty field is not a field."""
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


@dataclass
class Patient:
    """A patient, the problem they come with and the booking made for them."""

    name: str
    problem: str
    visit_time: str
    specialty: str = ""
    doctor: str = ""
    charge: float = 0.0
    visit: str = ""


@dataclass
class VisitSlot:
    """A doctor's working hours on one weekday."""

    weekday: int
    weekday_name: str
    arrival: int
    free_time: int
    count: int = 0


@dataclass
class Doctor:
    """A doctor with their fees, visit length and weekly presence."""

    name: str
    specialty: str
    cost: float
    avg_waiting_time: float
    visit_duration: float
    days: list[str] = field(default_factory=list)
    slots: list[VisitSlot] = field(default_factory=list)
    first_visit_time: int = 0

    def _next_free_slot(self) -> VisitSlot | None:
        for slot in self.slots:
            if slot.free_time != 0:
                self.first_visit_time = int(
                    slot.weekday * _DAY_WEIGHT + slot.arrival + slot.count * self.visit_duration
                )
                return slot
        return None

    def _rank(self) -> tuple[int, float, float, str]:
        return (self.first_visit_time, self.cost, self.avg_waiting_time, self.name)


@dataclass
class Disease:
    """A specialty, the problems it treats and the doctors practising it."""

    specialty: str
    diseases: list[str] = field(default_factory=list)
    doctors: list[Doctor] = field(default_factory=list)


def _read_lines(path: str | os.PathLike) -> list[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return _fields(handle.read(), "\n")
    except OSError:
        return []


def read_patients(path: str | os.PathLike) -> list[Patient]:
    """Read ``name,problem,visit_time`` rows after a header line."""
    patients = []
    for line in _read_lines(path)[1:]:
        name, problem, visit_time = (line.split(",") + ["", ""])[:3]
        patients.append(Patient(name, problem, visit_time))
    return patients


def read_doctors(path: str | os.PathLike) -> list[Doctor]:
    """Read ``name,specialty,cost,duration,waiting,days`` rows after a header line."""
    doctors = []
    for line in _read_lines(path)[1:]:
        parts = (line.split(",", 5) + [""] * 5)[:6]
        name, specialty, cost, duration, waiting, days = parts
        doctors.append(
            Doctor(
                name=name,
                specialty=specialty,
                cost=_to_float(cost),
                avg_waiting_time=_to_float(waiting),
                visit_duration=_to_float(duration),
                days=_fields(days, "$"),
            )
        )
    return doctors


def read_diseases(path: str | os.PathLike) -> list[Disease]:
    """Read every ``specialty,problem$problem`` row; no line is skipped."""
    diseases = []
    for line in _read_lines(path):
        parts = line.split(",")
        names = _fields(parts[1], "$") if len(parts) > 1 else []
        diseases.append(Disease(parts[0], names))
    return diseases


def parse_minutes(text: str) -> int:
    """Minutes since midnight for ``"9"`` or ``"9:30"``."""
    if ":" in text:
        hour, minute = text.split(":", 1)
        return _to_int(hour) * 60 + _to_int(minute)
    return _to_int(text) * 60


def format_time(minutes: int) -> str:
    """Render minutes since midnight as ``HH:MM``."""
    hours, rest = _trunc_divmod(minutes, 60)
    return f"{hours:02d}:{rest:02d}"


def _schedule(days: Sequence[str]) -> list[VisitSlot]:
    by_day: dict[int, VisitSlot] = {}
    for day in days:
        tokens = _fields(day, "-")
        if len(tokens) < 3:
            raise ValueError(f"invalid presence {day!r}")
        arrival = parse_minutes(tokens[1])
        departure = parse_minutes(tokens[2])
        if tokens[0] in WEEKDAYS:
            index = WEEKDAYS.index(tokens[0])
            by_day[index] = VisitSlot(index + 1, tokens[0], arrival, departure - arrival)
    return [by_day[index] for index in sorted(by_day)]


def _split_visit(text: str) -> tuple[str, int]:
    day, separator, rest = text.partition("-")
    return day, _to_int(rest if separator else text)


def _visit_order(a: Patient, b: Patient) -> int:
    day_a, hour_a = _split_visit(a.visit_time)
    day_b, hour_b = _split_visit(b.visit_time)
    if day_a in WEEKDAYS and day_b in WEEKDAYS:
        difference = WEEKDAYS.index(day_a) - WEEKDAYS.index(day_b)
        if difference:
            return -1 if difference < 0 else 1
    if hour_a != hour_b:
        return -1 if hour_a < hour_b else 1
    return (a.name > b.name) - (a.name < b.name)


def _book(patient: Patient, diseases: Sequence[Disease]) -> None:
    best: Doctor | None = None
    best_slot: VisitSlot | None = None
    for disease in diseases:
        if disease.specialty != patient.specialty:
            continue
        for doctor in disease.doctors:
            slot = doctor._next_free_slot()
            if slot is None:
                continue
            if best is None or doctor._rank() < best._rank():
                best, best_slot = doctor, slot
    if best is None or best_slot is None:
        patient.visit = NO_FREE_TIME
        return
    patient.doctor = best.name
    patient.charge = best.cost
    best_slot.free_time = int(best_slot.free_time - best.visit_duration)
    best_slot.count += 1
    _, start = _trunc_divmod(best.first_visit_time, _DAY_WEIGHT)
    patient.visit = f"{best_slot.weekday_name} {best_slot.count} {format_time(start)}"


def assign_visits(
    patients: list[Patient], diseases: Sequence[Disease], doctors: Sequence[Doctor]
) -> None:
    """Book every patient in place, in order of their requested visit time.

    Each specialty row gets its own copy of the matching doctors, and the
    patients list is left sorted by visit time.
    """
    for doctor in doctors:
        doctor.slots = _schedule(doctor.days)
    for disease in diseases:
        disease.doctors.extend(
            replace(doctor, slots=[replace(slot) for slot in doctor.slots], first_visit_time=0)
            for doctor in doctors
            if doctor.specialty == disease.specialty
        )
    for patient in patients:
        for disease in diseases:
            if patient.problem in disease.diseases:
                patient.specialty = disease.specialty
    patients.sort(key=cmp_to_key(_visit_order))
    for patient in patients:
        _book(patient, diseases)


def format_report(patients: Sequence[Patient]) -> str:
    """Render the bookings, ordered by patient name."""
    blocks = []
    for patient in sorted(patients, key=attrgetter("name")):
        if patient.visit == NO_FREE_TIME:
            lines = [f"Name: {patient.name}", NO_FREE_TIME]
        else:
            lines = [
                f"Name: {patient.name}",
                f"Doctor: {patient.doctor}",
                f"Visit: {patient.visit}",
                f"Charge: {patient.charge:g}",
            ]
        blocks.append("\n".join(lines) + "\n")
    return (SEPARATOR + "\n").join(blocks)


def main(argv: Sequence[str] | None = None) -> int:
    """Book the patients of ``patients.csv`` in the working directory."""
    try:
        patients = read_patients("patients.csv")
        doctors = read_doctors("doctors.csv")
        diseases = read_diseases("diseases.csv")
        assign_visits(patients, diseases, doctors)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    sys.stdout.write(format_report(patients))
    return 0


if __name__ == "__main__":
    sys.exit(main())