"""
Sorting and partitioning a batch of results.

Run: python examples/partition_results.py
"""
from eitherpy import lift, partition, nullable_sort_key


def main():
    parse_int = lift(int)
    raw = ["12", "x", "6", None, "oops", "3"]
    results = [parse_int(s) if s is not None else None for s in raw]

    # Exceptions are not orderable, so compare failures by message.
    # Missing entries sort first, then failures, then parsed values ascending.
    comparable = [e.map_left(str) if e is not None else None for e in results]
    print([str(e) for e in sorted(comparable, key=nullable_sort_key())])

    p = partition(results)
    print("parsed =>", p.rights)                   # [12, 6, 3]
    print("errors =>", [str(ex) for ex in p.lefts])
    print("missing =>", p.missing)                 # 1


if __name__ == "__main__":
    main()
