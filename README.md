# ttakit

Building blocks that keep track of time in ticks: SipHash hashing, hash
tables, tree and queue containers, modular arithmetic and number-theoretic
transforms, small arbitrary-precision numbers, a lifecycle-aware memory
registry, and a thread pool that takes tasks by priority.

The package is a pure-Python library with no runtime dependencies.

## Installation

```
pip install ttakit
```

To run the test suite:

```
pip install "ttakit[test]"
pytest
```

## Modules

| Module | What it provides |
| --- | --- |
| `ttakit.siphash` | SipHash-2-4 of one 64-bit word (`siphash24_word`) and of byte strings (`siphash24`) |
| `ttakit.hashmap` | `IntMap`, an open-addressing map from unsigned 64-bit integers with linear probing; `next_pow2` |
| `ttakit.table` | `HashTable`, a chained table with a fixed bucket count, hashed with SipHash over `bytes`/`str` keys by default |
| `ttakit.timing` | `get_tick_count()`, a monotonic millisecond tick |
| `ttakit.lifecycle` | `MemoryRegistry` of `Block`s with expiry, access auditing and clean-up; `AccessError`; `save_current_progress` for atomic file writes |
| `ttakit.container` | `FixedTuple` (fixed number of slots) and `HashSet` |
| `ttakit.nice` | `nice_to_prio`, `compare_nice`, `shuffle_by_nice`, `lock_priority`, `SchedPriority` |
| `ttakit.ntt` | modular arithmetic, Montgomery reduction, `ntt_transform`, `pointwise_mul`, `crt_combine`, the `NTT_PRIMES` table of `NttPrime`s |
| `ttakit.bignum` | `BigInt` (non-negative, 32-bit limbs), `BigReal`, `BigComplex`, `BigMul` |
| `ttakit.heap` | `HeapTree`, a binary heap ordered by a three-way comparator |
| `ttakit.queues` | `SimpleQueue`, `SimpleStack`, `PriorityTaskQueue` |
| `ttakit.tasks` | `Future`, `Promise`, `Task`, `schedule`, `yield_now` |
| `ttakit.atomic` | `AtomicU64` and `FuncWrapper`, which runs a function under a lock until it expires |
| `ttakit.scheduler` | the shared `Scheduler` returned by `get_instance()` |
| `ttakit.pool` | `ThreadPool` and its `Worker`s |
| `ttakit.ast` | `AstNode` and `AstTree` |
| `ttakit.bplus` | `BPlusTree` with linked leaves |
| `ttakit.btree` | `BTree` with a chosen minimum degree |

## Examples

Hashing and tables:

```python
from ttakit.siphash import siphash24
from ttakit.table import HashTable

digest = siphash24(b"hello", 0x0706050403020100, 0x0F0E0D0C0B0A0908)

table = HashTable(16)
table.put(b"alpha", 1)
assert table.get(b"alpha") == 1
assert b"beta" not in table
```

Number-theoretic transform round trip:

```python
from ttakit.ntt import NTT_PRIMES, ntt_transform

prime = NTT_PRIMES[0]          # modulus 998244353
data = [1, 2, 3, 4]
spectrum = ntt_transform(data, prime)
assert ntt_transform(spectrum, prime, inverse=True) == data
```

The length must be a non-zero power of two no larger than
`2 ** prime.max_power_two`; otherwise `ValueError` is raised.

Tracked values with lifetimes:

```python
from ttakit.lifecycle import AccessError, MemoryRegistry

registry = MemoryRegistry()
block = registry.alloc("payload", lifetime=100, now=0)
assert registry.access(block, now=50) == "payload"
try:
    registry.access(block, now=200)
except AccessError:
    pass                       # expired
assert registry.autoclean(now=200) == 1
```

Running work on a pool:

```python
from ttakit.pool import ThreadPool

with ThreadPool(4) as pool:
    future = pool.submit(lambda x: x * 2, 21, priority=0)
    assert future.result() == 42
```

Higher priority values run first; tasks of equal priority run in the order
they were submitted.

B-trees:

```python
from ttakit.btree import BTree

tree = BTree(2)
for key in range(10):
    tree.insert(key, str(key))
assert tree.search(7) == "7"
```

## Limits

- `BigInt` holds non-negative values and supports addition only;
  `BigInt.mersenne_mod(p)` keeps the low `p` bits rather than folding the
  high part back in. `BigReal` addition requires equal exponents, and
  `BigMul` only groups its three operands; it does not multiply.
- The shared `Scheduler` always reports priority 0, no pending or running
  tasks and a load of 0.0; `set_priority_override` records the request but
  does not change scheduling.
- Shutting down a `ThreadPool` drops tasks still queued; their futures never
  complete.
- `BTree` and `BPlusTree` support insertion and lookup but not deletion.
- The package offers no command-line program.