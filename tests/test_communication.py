import queue

import pytest

from gopherlab.communication import consumer, producer, run_communicate_task


def test_producer_then_consumer_round_trip():
    channel = queue.Queue()
    producer(channel, 4, 0)
    assert consumer(channel, 1, 0) == [0, 1, 2, 3]


def test_closed_channel_stays_closed_for_other_consumers():
    channel = queue.Queue()
    producer(channel, 2, 0)
    assert consumer(channel, 1, 0) == [0, 1]
    assert consumer(channel, 2, 0) == []


def test_producer_output(capsys):
    channel = queue.Queue()
    producer(channel, 1, 0)
    out = capsys.readouterr().out
    assert "Producing 0" in out
    assert out.strip().endswith("Producer finished")


def test_consumer_output(capsys):
    channel = queue.Queue()
    producer(channel, 1, 0)
    capsys.readouterr()
    consumer(channel, 7, 0)
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Consumer 7 started", "Consumer 7 processing 0", "Consumer 7 finished"]


def test_run_distributes_every_item_once():
    results = run_communicate_task(6, 2)
    assert set(results) == {1, 2}
    combined = sorted(item for items in results.values() for item in items)
    assert combined == list(range(6))


def test_run_with_no_items():
    assert run_communicate_task(0, 3) == {1: [], 2: [], 3: []}


def test_run_reports_finish(capsys):
    run_communicate_task(1, 1)
    assert "Producer and consumers finished." in capsys.readouterr().out


def test_run_requires_a_consumer():
    with pytest.raises(ValueError):
        run_communicate_task(3, 0)