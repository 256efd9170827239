import io

import pytest

from minitools.metro import (
    Line,
    arrival_time_of_train,
    format_plan,
    main,
    parse_network,
    parse_time,
    plan_trip,
    trip_cost,
)

NETWORK = """1 7:05
L1 10
2
5 A
3 B
1
4 C
B
"""


def test_parse_time_splits_on_colons():
    assert parse_time("7:05") == (7, 5)


def test_parse_time_rejects_garbage():
    with pytest.raises(ValueError):
        parse_time("seven")


def test_parse_network_reads_lines_and_destination():
    lines, start, destination = parse_network(NETWORK)
    assert start == (7, 5)
    assert destination == "B"
    assert [line.name for line in lines] == ["L1"]
    assert lines[0].towards_start == [(5, "A"), (3, "B")]
    assert lines[0].towards_end == [(4, "C")]
    assert lines[0].wait_minutes == 10


def test_parse_network_truncated_input():
    with pytest.raises(ValueError):
        parse_network("1 7:05 L1")


@pytest.mark.parametrize("wait", [3, 7, 10])
@pytest.mark.parametrize("time", [(6, 0), (7, 5), (9, 59), (12, 30)])
def test_arrival_is_next_multiple_of_wait(wait, time):
    now = (time[0] - 6) * 60 + time[1]
    result = arrival_time_of_train(wait, time)
    assert result % wait == 0
    assert now <= result < now + wait


def test_trip_cost_single_station():
    assert trip_cost(1) == 1000


def test_trip_cost_grows_with_stations():
    costs = [trip_cost(n) for n in range(1, 20)]
    assert costs == sorted(costs)
    assert len(set(costs)) == len(costs)


def test_worked_example_output():
    line = Line("L1", 10, [(5, "A"), (3, "B")], [(4, "C")])
    plan = plan_trip([line], (6, 0), "A")
    assert format_plan(plan) == "Towards start of L1 in 1 station(s)\n6:5\n1000"


def test_destination_towards_end():
    lines, start, _ = parse_network(NETWORK)
    plan = plan_trip(lines, start, "C")
    assert plan.direction == "end"
    assert plan.line == "L1"
    assert plan.stations == len(lines[0].towards_end)
    assert plan.cost == trip_cost(plan.stations)


def test_arrival_includes_ride_time():
    lines, start, _ = parse_network(NETWORK)
    plan_a = plan_trip(lines, start, "A")
    plan_b = plan_trip(lines, start, "B")
    assert plan_b.arrival_minutes - plan_a.arrival_minutes == lines[0].towards_start[1][0]


def test_unknown_destination():
    lines, start, _ = parse_network(NETWORK)
    with pytest.raises(ValueError):
        plan_trip(lines, start, "Nowhere")


def test_main_prints_plan(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(NETWORK))
    assert main([]) == 0
    expected = format_plan(plan_trip(*parse_network(NETWORK)))
    assert capsys.readouterr().out == expected + "\n"


def test_main_reports_missing_station(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(NETWORK.replace("\nB\n", "\nZ\n")))
    assert main([]) == 1
    assert "Z" in capsys.readouterr().err