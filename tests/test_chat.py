import threading
import uuid

import pytest

from osalgos.chat import MESSAGE_SIZE, QUIT, ChatChannel, chat_loop


@pytest.fixture
def name():
    return f"osalgos-test-{uuid.uuid4().hex[:12]}"


def _scripted(lines):
    remaining = list(lines)

    def read_line(prompt):
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


def test_first_party_initializes_turn(name):
    with ChatChannel(name, first=1) as channel:
        assert channel.turn == 1


def test_second_party_does_not_override_turn(name):
    with ChatChannel(name, first=1) as first:
        first.send("hi", 2)
        second = ChatChannel(name, first=1)
        try:
            assert second.turn == 2
        finally:
            second.close()


def test_send_and_take_round_trip(name):
    with ChatChannel(name, first=1) as first:
        second = ChatChannel(name)
        try:
            first.send("hello there", 2)
            assert second.turn == 2
            assert second.take_message() == "hello there"
            assert second.take_message() == ""
        finally:
            second.close()


def test_message_truncated_to_buffer(name):
    with ChatChannel(name, first=1) as channel:
        channel.send("x" * 500, 2)
        assert len(channel.take_message()) == MESSAGE_SIZE - 1


def test_wait_turn_and_quit(name):
    with ChatChannel(name, first=1) as channel:
        assert channel.wait_turn(1) is True
        channel.quit()
        assert channel.turn == QUIT
        assert channel.wait_turn(2) is False


def test_wait_turn_blocks_until_handed_over(name):
    with ChatChannel(name, first=1) as channel:
        result = []
        waiter = threading.Thread(target=lambda: result.append(channel.wait_turn(2)))
        waiter.start()
        waiter.join(0.1)
        assert waiter.is_alive()
        channel.send("go", 2)
        waiter.join(2)
        assert result == [True]


def test_two_parties_converse(name):
    first = ChatChannel(name, first=1)
    second = ChatChannel(name)
    out1, out2 = [], []
    threads = [
        threading.Thread(
            target=chat_loop, args=(first, 1, 2, _scripted(["hello", "q"]), out1.append)
        ),
        threading.Thread(
            target=chat_loop, args=(second, 2, 1, _scripted(["world"]), out2.append)
        ),
    ]
    try:
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join(5)
        assert not any(thread.is_alive() for thread in threads)
        assert out1 == ["Chat 2: world"]
        assert out2 == ["Chat 1: hello", "Chat 2 is exiting..."]
    finally:
        if any(thread.is_alive() for thread in threads):
            first.quit()
        first.close()
        second.close()


def test_end_of_input_quits(name):
    with ChatChannel(name, first=1) as channel:
        outputs = []
        chat_loop(channel, 1, 2, _scripted([]), outputs.append)
        assert channel.turn == QUIT
        assert outputs == []


def test_loop_exits_when_already_quit(name):
    with ChatChannel(name, first=1) as channel:
        channel.quit()
        outputs = []
        chat_loop(channel, 1, 2, _scripted(["unused"]), outputs.append)
        assert outputs == ["Chat 1 is exiting..."]