import threading

import pytest

from gopherlab.processing import (
    TaskProcessor,
    process_data_item,
    run_process_items,
    run_task_processor,
)


def test_process_data_item_returns_id(capsys):
    assert process_data_item(3, 0, 0) == 3
    assert capsys.readouterr().out.splitlines() == [
        "Processing item 3...",
        "Finished processing item 3.",
    ]


def test_run_process_items_handles_every_item():
    assert sorted(run_process_items([2, 1])) == [1, 2]


def test_run_process_items_finishing_order_follows_delay():
    assert run_process_items([3, 1]) == [1, 3]


def test_run_process_items_empty(capsys):
    assert run_process_items([]) == []
    assert "All items processed." in capsys.readouterr().out


def test_task_processor_runs_all_tasks():
    seen = []
    lock = threading.Lock()

    def record(n):
        with lock:
            seen.append(n)

    processor = TaskProcessor(2)
    for n in range(8):
        processor.submit(lambda n=n: record(n))
    processor.stop()
    assert processor.errors == []
    assert sorted(seen) == list(range(8))


def test_task_processor_context_manager():
    seen = []
    with TaskProcessor(3) as processor:
        for n in range(5):
            processor.submit(lambda n=n: seen.append(n))
    assert sorted(seen) == list(range(5))


def test_submit_after_stop_raises():
    processor = TaskProcessor(1)
    processor.stop()
    with pytest.raises(RuntimeError):
        processor.submit(lambda: None)


def test_stop_twice_raises():
    processor = TaskProcessor(1)
    processor.stop()
    with pytest.raises(RuntimeError):
        processor.stop()


def test_failing_task_is_recorded_and_pool_continues():
    seen = []

    def boom():
        raise ValueError("bad task")

    with TaskProcessor(1) as processor:
        processor.submit(boom)
        processor.submit(lambda: seen.append("after"))
    assert seen == ["after"]
    assert len(processor.errors) == 1
    assert isinstance(processor.errors[0], ValueError)


def test_zero_workers_rejected():
    with pytest.raises(ValueError):
        TaskProcessor(0)


def test_run_task_processor(capsys):
    executed = run_task_processor(4, 4)
    assert sorted(executed) == [1, 2, 3, 4]
    out = capsys.readouterr().out
    assert "Task processor stopped." in out
    assert out.count("shutting down.") == 4