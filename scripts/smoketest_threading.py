"""
Stress test: text conversion of distinct containers from many threads.

Each thread owns its containers, so no locking is needed and
every round-trip must come out exact.
"""

import sys
import time
from threading import Thread

from nullable import BOOL, FLOAT32, FLOAT64, INT8, INT64, Nullable

if not hasattr(sys, "_is_gil_enabled") or sys._is_gil_enabled():
    # Running with GIL enabled can still be useful to compare performance,
    # but be sure to warn that threading hasn't been stress tested.
    print("WARNING: Running with GIL enabled. Threading not stress tested.")


NUM_THREADS = 16
NUM_ITERATIONS = 5_000
SAMPLE = [
    (BOOL, "true"),
    (BOOL, "null"),
    (INT8, "-128"),
    (INT64, "9223372036854775807"),
    (FLOAT32, "0.10000000149011612"),
    (FLOAT64, "3.14159265358979"),
    (FLOAT64, ""),
]
TEXTS = SAMPLE * (NUM_THREADS * NUM_ITERATIONS // len(SAMPLE))


def roundtrip(sample):
    containers = {kind: Nullable(kind) for kind, _ in SAMPLE}
    for kind, text in sample:
        n = containers[kind]
        n.unmarshal_text(text)
        out = n.marshal_text()
        assert out == ("" if text == "null" else text), (kind, text, out)


def main(func):
    print(f"Starting test: {func.__name__}")
    threads = []

    start_time = time.time()

    for n in range(NUM_THREADS):
        thread = Thread(target=func, args=(TEXTS[n::NUM_THREADS],))
        threads.append(thread)
        thread.start()

    for thread in threads:
        thread.join()

    end_time = time.time()
    print(f"Execution time: {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    main(roundtrip)
