from __future__ import annotations

import threading

from ddfloat import MAX_VALUE, from_pair


def _hammer(fn, n_threads: int = 16) -> list:
    barrier = threading.Barrier(n_threads)
    out: list = [None] * n_threads

    def worker(i: int) -> None:
        barrier.wait()
        out[i] = fn()

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(n_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    return out


def test_concurrent_negation_installs_single_partner():
    for k in range(20):
        x = from_pair(1.0 + k, 1e-20)
        results = _hammer(x.negated)
        first = results[0]
        assert all(r is first for r in results)
        assert first.negated() is x


def test_concurrent_abs_is_consistent():
    x = from_pair(-3.0, 1e-18)
    results = _hammer(x.abs)
    assert all(r == results[0] for r in results)
    assert results[0] is x.negated()


def test_concurrent_max_value_negation():
    results = _hammer(MAX_VALUE.negated)
    assert all(r is results[0] for r in results)
    assert results[0].negated() is MAX_VALUE
