import threading
from itertools import accumulate

import pytest

from osalgos.producer_consumer import BoundedBuffer, main, run


def test_put_get_round_trip_in_fifo_order():
    buffer = BoundedBuffer(3)
    for value in ("a", "b", "c"):
        buffer.put(value)
    assert [buffer.get() for _ in range(3)] == ["a", "b", "c"]


def test_slots_wrap_around():
    buffer = BoundedBuffer(2)
    slots = []
    for value in range(5):
        slots.append(buffer.put(value))
        assert buffer.get() == value
    assert slots == [0, 1, 0, 1, 0]


def test_callbacks_report_item_and_slot():
    events = []
    buffer = BoundedBuffer(
        2,
        on_put=lambda item, slot: events.append(("put", item, slot)),
        on_get=lambda item, slot: events.append(("get", item, slot)),
    )
    buffer.put("x")
    buffer.put("y")
    buffer.get()
    assert events == [("put", "x", 0), ("put", "y", 1), ("get", "x", 0)]


def test_put_blocks_while_full():
    buffer = BoundedBuffer(1)
    buffer.put(1)
    worker = threading.Thread(target=buffer.put, args=(2,))
    worker.start()
    worker.join(0.1)
    assert worker.is_alive()
    assert buffer.get() == 1
    worker.join(2)
    assert not worker.is_alive()
    assert buffer.get() == 2


def test_get_blocks_while_empty():
    buffer = BoundedBuffer(2)
    taken = []
    worker = threading.Thread(target=lambda: taken.append(buffer.get()))
    worker.start()
    worker.join(0.1)
    assert worker.is_alive()
    buffer.put("late")
    worker.join(2)
    assert taken == ["late"]


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_size(size):
    with pytest.raises(ValueError):
        BoundedBuffer(size)


def test_run_consumes_everything_produced():
    lines = []
    consumed = run(20, 5, 7, lines.append)
    assert consumed == [7] * 20
    assert len(lines) == 40
    assert lines[0] == "producer produced 7 at 0"


def test_run_message_slots_cycle():
    lines = []
    run(12, 5, 0, lines.append)
    produced = [int(line.split()[-1]) for line in lines if line.startswith("producer")]
    consumed = [int(line.split()[-1]) for line in lines if line.startswith("CONSUMER")]
    expected = [n % 5 for n in range(12)]
    assert produced == expected
    assert consumed == expected


def test_run_never_consumes_ahead_of_production():
    lines = []
    run(30, 3, 1, lines.append)
    balances = list(
        accumulate(1 if line.startswith("producer") else -1 for line in lines)
    )
    assert len(balances) == 60
    assert min(balances) >= 0
    assert max(balances) <= 3
    assert balances[-1] == 0


def test_run_rejects_negative_count():
    with pytest.raises(ValueError):
        run(-1, 5, 0, lambda line: None)


def test_main_prints_steps(capsys):
    assert main(["--count", "3", "--size", "2", "--item", "4"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out.count("producer produced 4 at 0") == 2
    assert len(out) == 6