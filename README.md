# lotools

Small helpers for everyday Python work, with no dependencies outside the
standard library:

- searching and comparing sequences,
- reshaping mappings,
- chaining conditions as expressions,
- turning exceptions into results and results into exceptions,
- passing messages between threads over bounded channels.

## Installation

```
pip install lotools
```

To run the test suite, install the `test` extra:

```
pip install "lotools[test]"
pytest
```

## Modules

### `lotools.find`

This module finds items by position, by predicate and by extreme value:

- `index_of`, `last_index_of`
- `find`, `find_index_of`, `find_last_index_of`, `find_or_else`
- `find_key`, `find_key_by`
- `find_uniques`, `find_uniques_by`, `find_duplicates`, `find_duplicates_by`
- `minimum`, `min_index`, `min_by`, `min_index_by`
- `maximum`, `max_index`, `max_by`, `max_index_by`
- `earliest`, `earliest_by`, `latest`, `latest_by`
- `first`, `first_or_empty`, `first_or`
- `last`, `last_or_empty`, `last_or`
- `nth`, `nth_or`, `nth_or_empty`
- `sample`, `sample_by`, `samples`, `samples_by`

How these functions behave at the edges:

- An empty collection gives `None`, or `(None, False)` or `(None, -1)` where a flag or an index is also returned.
- `nth` raises `IndexError` when the index is out of bounds.
- The `*_by` extremes take a comparison `f(a, b)` that means "a is better than b". On ties the first item is kept.
- For list and tuple inputs, the functions that return sequences return the same type.

### `lotools.intersect`

This module gives membership tests and set-like operations that keep order:

- `contains`, `contains_by`
- `every`, `every_by`
- `some`, `some_by`
- `none`, `none_by`
- `intersect`, `difference`, `union`
- `without`, `without_by`, `without_nth`

### `lotools.maps`

This module gives readers, filters and transformers for mappings:

- `keys`, `uniq_keys`, `values`, `uniq_values`
- `has_key`, `value_or`
- `pick_by`, `pick_by_keys`, `pick_by_values`
- `omit_by`, `omit_by_keys`, `omit_by_values`
- `entries` and its alias `to_pairs`, which return frozen `Entry(key, value)` pairs
- `from_entries` and its alias `from_pairs`
- `invert`, `assign`, `chunk_entries`
- `map_keys`, `map_values`, `map_entries`, `map_to_slice`

`chunk_entries` raises `ValueError` when the chunk size is not positive.

### `lotools.condition`

This module gives conditionals written as expressions:

- `ternary` and `ternary_f`
- the `if_(...)` / `if_f(...)` chain, with `.else_if`, `.else_if_f`, `.else_` and `.else_f`
- `switch(value)`, with `.case`, `.case_f`, `.default` and `.default_f`

### `lotools.errors`

`must`, `must0` and `must_all` return their values unchanged. They raise `MustError` when the `err` argument is an exception or `False`. The optional message arguments are either a single string, or a `%`-format string followed by its arguments.

The other helpers in this module:

- `validate` returns a `ValueError`, or `None`.
- `try_call` reports whether a callable ran without raising.
- `try_or` returns fallbacks on failure.
- `try_with_error_value`, `try_catch` and `try_catch_with_error_value` pass on or handle the exception that was raised.
- `errors_as` searches an exception's cause/context chain for a given type.

### `lotools.functional`

`partial(f, arg1)` binds the first argument of `f`.

### `lotools.channel`

`Channel(capacity)` is a thread-safe FIFO channel. It provides:

- `send`
- `receive(timeout=None)`
- `close`
- `is_full`
- `len()`
- iteration, which runs until the channel is closed and drained

A capacity of 0 makes it unbuffered. Operations on a closed channel raise `ChannelClosed`.

The module also provides these helpers:

- `channel_dispatcher` spreads messages across child channels. It takes a dispatching strategy:
  - `dispatching_strategy_round_robin`
  - `dispatching_strategy_random`
  - `dispatching_strategy_weighted_random(weights)`
  - `dispatching_strategy_first`
  - `dispatching_strategy_least`
  - `dispatching_strategy_most`
- `slice_to_channel`, `channel_to_slice` and `generator` convert between channels and ordinary data.
- `fan_in` merges channels and `fan_out` broadcasts to them.
- `buffer`, `buffer_with_timeout` (timeout in seconds) and `buffer_with_context` (stops when a `threading.Event` is set) read batches. Each returns a `BufferResult` with these fields:
  - `items`
  - `length`
  - `read_time`
  - `ok`, which is false once the channel has closed

### `lotools.concurrency`

- `synchronize()` returns a `Synchronize` whose `do(callback)` runs callbacks one at a time under a lock. It uses a new lock unless you pass one. Exceptions raised by the callback are swallowed.
- `async_(f)` and `async0(f)` run `f` in a thread. They return a `Channel` that receives the result, or `None` when `f` finishes.
- `wait_for(condition, timeout, heartbeat_delay)` polls a condition; times are in seconds. It returns `(iterations, elapsed, found)`.
- `wait_for_with_context` does the same and also stops when an event is set.

## Examples

```python
from lotools.find import find_duplicates, nth
from lotools.maps import assign
from lotools.condition import if_, switch
from lotools.errors import must, try_or

find_duplicates([1, 2, 2, 1, 2, 3])          # [1, 2]
nth([0, 1, 2, 3], -2)                        # 2
assign({"a": 1, "b": 2}, {"b": 3, "c": 4})   # {"a": 1, "b": 3, "c": 4}

if_(False, 1).else_if(True, 2).else_(3)      # 2
switch(42).case(1, "one").case(42, "answer").default("other")  # "answer"

must("foo", None)                            # "foo"; raises MustError on failure
try_or(lambda: int("x"), 42)                 # (42, False)
```

Channels carry values between threads and close like a pipe:

```python
from lotools.channel import slice_to_channel, channel_to_slice, fan_out

upstream = slice_to_channel(10, [0, 1, 2])
copies = fan_out(2, 10, upstream)
[channel_to_slice(c) for c in copies]        # [[0, 1, 2], [0, 1, 2]]
```

## What it does not do

`lotools` is a library only. It has no command-line tool.

Channels work between threads in one process. They are not an asyncio primitive and do not cross process boundaries.