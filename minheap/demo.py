"""Small walkthrough of the heap operations."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from minheap.heap import BinaryMinHeap, HeapEmptyError


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration and print what each step produced."""
    parser = argparse.ArgumentParser(
        prog="minheap-demo", description="Demonstrate the binary min-heap."
    )
    parser.parse_args(argv)

    try:
        first = BinaryMinHeap()
        second = first.copy()
        third = second.copy()

        for value in (9, 8, 7, 6, 5):
            first.insert(value)

        for value in (1, 2, 3, 4):
            second += value

        third += 100
        third += 200
        third.insert(300)
        third.insert(400)

        print(f"first: {first}")
        print(f"second: {second}")
        print(f"third: {third}")

        print(f"extracted min: {first.extract_min()}")
        print(f"current min: {first.get_min()}")

        first.remove(2)
        first -= 7
        print(f"after removals: {first}")

        first.clear()
        second.clear()

        print(f"first empty: {first.is_empty()}")
        print(f"second empty: {second.is_empty()}")
        print(f"live heaps: {BinaryMinHeap.instance_count()}")
    except HeapEmptyError as exc:
        print(exc)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())