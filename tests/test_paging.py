import io

import pytest

from osalgos.paging import (
    fifo_replace,
    format_frames,
    lfu_replace,
    lru_replace,
    main,
)

BELADY = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("frame_count", [0, -1])
def test_non_positive_frame_count_rejected(frame_count):
    with pytest.raises(ValueError):
        fifo_replace([1, 2, 3], frame_count)
    with pytest.raises(ValueError):
        lru_replace([1, 2, 3], frame_count)
    with pytest.raises(ValueError):
        lfu_replace([1, 2, 3], frame_count)


def test_repeated_page_faults_once():
    results = [
        fifo_replace([7, 7, 7, 7], 3),
        lru_replace([7, 7, 7, 7], 3),
        lfu_replace([7, 7, 7, 7], 3),
    ]
    assert [result.faults for result in results] == [1, 1, 1]
    assert [result.hits for result in results] == [3, 3, 3]


def test_hits_and_faults_cover_all_references():
    results = [
        fifo_replace(BELADY, 3),
        lru_replace(BELADY, 3),
        lfu_replace(BELADY, 3),
    ]
    assert [r.hits + r.faults for r in results] == [len(BELADY)] * 3
    assert [r.references for r in results] == [len(BELADY)] * 3


def test_every_insertion_places_its_page():
    results = [
        fifo_replace(BELADY, 3),
        lru_replace(BELADY, 3),
        lfu_replace(BELADY, 3),
    ]
    assert all(
        page in frames and len(frames) == 3
        for result in results
        for page, frames in result.insertions
    )
    assert [r.frames for r in results] == [r.insertions[-1][1] for r in results]


def test_distinct_pages_fitting_in_frames_fault_once_each():
    pages = [4, 5, 6, 4, 5, 6]
    fifo = fifo_replace(pages, 3)
    lfu = lfu_replace(pages, 3)
    assert fifo.faults == len(set(pages))
    assert lfu.faults == len(set(pages))
    assert set(fifo.frames) == set(pages)
    assert set(lfu.frames) == set(pages)


def test_fifo_replaces_oldest_frame():
    result = fifo_replace([1, 2, 3, 4], 3)
    assert result.insertions[-1] == (4, (4, 2, 3))


def test_fifo_shows_belady_anomaly():
    assert fifo_replace(BELADY, 4).faults > fifo_replace(BELADY, 3).faults


def test_lru_first_page_shares_stamp_with_empty_frames():
    result = lru_replace([1, 2, 3], 3)
    assert result.frames == (2, 3, None)


def test_lfu_keeps_frequently_used_page():
    result = lfu_replace([1, 1, 2, 3], 2)
    assert result.frames == (1, 3)


def test_format_frames_marks_empty():
    assert format_frames((1, None)) == "[ 1 - ]"


def test_format_frames_empty_sequence():
    assert format_frames(()) == "[ ]"


def test_main_prints_faults(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("4\n1 2 1 3\n2\n"))
    assert main(["fifo"]) == 0
    out = capsys.readouterr().out
    expected = fifo_replace([1, 2, 1, 3], 2)
    assert f"Total Page Faults = {expected.faults}" in out
    assert f"Page 3 inserted -> {format_frames(expected.frames)}" in out


def test_main_rejects_short_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5 1 2"))
    assert main(["lru"]) == 1
    assert "error" in capsys.readouterr().err