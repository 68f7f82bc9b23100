import pytest

from pagesim.types import ReplacementAlgorithm, Scheduler


@pytest.mark.parametrize("algorithm", list(ReplacementAlgorithm))
def test_algorithm_parse_round_trip(algorithm):
    assert ReplacementAlgorithm.parse(str(algorithm)) is algorithm


@pytest.mark.parametrize("scheduler", list(Scheduler))
def test_scheduler_parse_round_trip(scheduler):
    assert Scheduler.parse(str(scheduler)) is scheduler


def test_algorithm_names():
    names = ["FIFO", "LRU", "OPT", "CLOCK"]
    parsed = [ReplacementAlgorithm.parse(name) for name in names]
    assert parsed == list(ReplacementAlgorithm)
    assert [str(algorithm) for algorithm in parsed] == names


def test_scheduler_names():
    names = ["FCFS", "SJF", "SRTN"]
    parsed = [Scheduler.parse(name) for name in names]
    assert parsed == list(Scheduler)
    assert [str(scheduler) for scheduler in parsed] == names


@pytest.mark.parametrize("text", ["fifo", "", "RANDOM", " LRU"])
def test_algorithm_parse_rejects_unknown(text):
    with pytest.raises(ValueError):
        ReplacementAlgorithm.parse(text)


@pytest.mark.parametrize("text", ["fcfs", "", "RR", "SJF "])
def test_scheduler_parse_rejects_unknown(text):
    with pytest.raises(ValueError):
        Scheduler.parse(text)


def test_algorithm_descriptions_from_source():
    assert ReplacementAlgorithm.FIFO.description() == "First In First Out"
    assert ReplacementAlgorithm.LRU.description() == "Least Recently Used"
    assert ReplacementAlgorithm.OPT.description() == "Optimal"


def test_scheduler_descriptions_from_source():
    assert Scheduler.FCFS.description() == "First Come First Serve"
    assert Scheduler.SJF.description() == "Shortest Job First"
    assert Scheduler.SRTN.description() == "Shortest Remaining Time First"


def test_every_member_has_distinct_description():
    algorithm_descriptions = {
        ReplacementAlgorithm.parse(name).description()
        for name in ("FIFO", "LRU", "OPT", "CLOCK")
    }
    assert len(algorithm_descriptions) == 4
    scheduler_descriptions = {
        Scheduler.parse(name).description() for name in ("FCFS", "SJF", "SRTN")
    }
    assert len(scheduler_descriptions) == 3