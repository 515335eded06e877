# osalgos

Classic operating-system algorithms and exercises, usable as a library and
from the command line. It has no dependencies outside the standard library.

## What is inside

| Module | Covers |
| --- | --- |
| `osalgos.cpu_scheduling` | FCFS, non-preemptive priority, round robin, SJF and SRTF CPU scheduling |
| `osalgos.disk_scheduling` | FCFS, SCAN and C-SCAN disk head orders with seek totals |
| `osalgos.paging` | FIFO, LRU and LFU page replacement with fault counts |
| `osalgos.memory_alloc` | First, best and worst fit allocation with fragmentation figures |
| `osalgos.bankers` | The banker's algorithm: need matrix, safe sequence, resource requests |
| `osalgos.producer_consumer` | A semaphore-guarded bounded buffer shared by a producer and a consumer thread |
| `osalgos.files` | Writing a file and reading it back; listing directory entries with their stats |
| `osalgos.processes` | Running a command as a child process; reporting a child's pid and parent pid |
| `osalgos.chat` | A two-party, turn-taking chat over a named shared memory segment |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Library use

### CPU scheduling

Processes are `Process(pid, arrival, burst, priority=None)`. Each algorithm
returns a list of `ScheduledProcess`, which carries the completion time and
derives `turnaround` and `waiting` from it.

```python
from osalgos.cpu_scheduling import Process, fcfs, round_robin, average_waiting, format_table

procs = [Process(1, 0, 5), Process(2, 1, 3), Process(3, 2, 1)]
results = fcfs(procs)
print(format_table(results))
print(average_waiting(results))

print(format_table(round_robin(procs, quantum=2)))
```

`fcfs` orders by arrival, `priority_schedule` by priority (lower runs first;
every process needs a priority), `sjf` by burst time, and `srtf` preempts in
steps of one time unit. `round_robin` and `srtf` reject non-positive burst
times, and `round_robin` rejects a non-positive quantum, with `ValueError`.
`average_waiting` and `average_turnaround` raise `ValueError` on an empty list.

### Disk scheduling

```python
from osalgos.disk_scheduling import fcfs_order, scan_order, cscan_order, seek_moves, total_seek

order = fcfs_order(53, [98, 183])
print(total_seek(order))          # 130

for move in seek_moves(scan_order(53, [98, 183, 37], 199)):
    print(move.start, move.end, move.seek)
```

`scan_order` serves requests at or above the head in ascending order, goes to
the end of the disk, then serves the rest in descending order. `cscan_order`
does the same but serves the remaining requests in ascending order after
reaching the end.

### Page replacement

```python
from osalgos.paging import lru_replace, format_frames

result = lru_replace([7, 0, 1, 2, 0, 3, 0, 4], frame_count=3)
print(result.faults, result.hits)
for page, frames in result.insertions:
    print(page, format_frames(frames))   # e.g. [ 7 - - ]
```

`fifo_replace`, `lru_replace` and `lfu_replace` all return a `PagingResult`
and raise `ValueError` for a frame count below one.

### Memory allocation

```python
from osalgos.memory_alloc import Block, Request, first_fit, best_fit, worst_fit

blocks = [Block(1, 100), Block(2, 500), Block(3, 200)]
requests = [Request(1, 212), Request(2, 90)]
result = best_fit(blocks, requests)
for request, block in result.placements:
    print(request.id, None if block is None else block.id)
print(result.internal_fragmentation(), result.external_fragmentation())
```

### Banker's algorithm

```python
from osalgos.bankers import ResourceState, RequestOutcome, ExceedsNeedError

state = ResourceState(
    allocation=[[0, 1, 0], [2, 0, 0], [3, 0, 2]],
    maximum=[[7, 5, 3], [3, 2, 2], [9, 0, 2]],
    available=[3, 3, 2],
)
print(state.need())
print(state.safe_sequence())      # list of process indices, or None
outcome = state.request(1, [1, 0, 2])
```

`request` returns `RequestOutcome.GRANTED`, `MUST_WAIT` (not enough available)
or `DENIED` (the allocation is rolled back), and raises `ExceedsNeedError`
when the request is larger than the process's remaining need.

### Producer and consumer

`BoundedBuffer(size, on_put=None, on_get=None)` has blocking `put` and `get`.
`run(count=20, buffer_size=5, item=0, emit=print)` runs one producer and one
consumer thread for `count` items each and returns the consumed items.

### Files, processes and chat

- `write_and_read(path, text)` writes text at the start of a file and returns
  what is read back; `list_file_stats(directory)` returns a `FileStat` per
  entry (including `.` and `..`) and `format_stats` renders them.
- `spawn_and_wait(command)` runs a command and returns its exit code;
  `describe_child()` starts a child process and returns its `(pid, parent pid)`.
- `ChatChannel(name="JO", first=None)` attaches to (or creates) a named shared
  memory segment; `chat_loop(channel, me, peer, read_line, output)` alternates
  turns until one side enters `q` or input runs out.

## Command line

The scheduling, paging, allocation and banker's commands read
whitespace-separated integers from standard input; `--help` describes the
expected layout.

```
osalgos-cpu {fcfs,priority,sjf,srtf,rr}    < processes.txt
osalgos-disk {fcfs,scan,cscan}             < requests.txt
osalgos-paging {fifo,lru,lfu}              < pages.txt
osalgos-memory                             < blocks.txt
osalgos-bankers                            < state.txt
osalgos-prodcons [--count N] [--size N] [--item N]
osalgos-fileread [path] [--text TEXT]
osalgos-filestatus [directory]
osalgos-processes spawn COMMAND...
osalgos-processes pid
osalgos-chat [1|2] [--name NAME]
```

For example, FCFS CPU scheduling of three processes (`id arrival burst` each):

```
printf '3\n1 0 5\n2 1 3\n3 2 1\n' | osalgos-cpu fcfs
```

For round robin the quantum follows the process count; for `priority` each
process has a fourth number, its priority. `osalgos-chat` is run in two
terminals, once as party 1 and once as party 2, with the same `--name`.

## What this package does not include

`osalgos-processes` with no command runs `./ADD 10 20` from the current
directory. No `ADD` program comes with this package; supply one, or pass your
own command after `spawn`.