"""
Basic Either usage: capture, composition, and consumption.

Run: python examples/basic_either.py
"""
from eitherpy import Either, lift, right, ConsoleLogger


def main():
    logger = ConsoleLogger(level="WARN")
    parse_hex = lift(lambda s: int(s, 16), logger=logger)

    # Combine two captured parses with an applicative add
    add = lambda x: lambda y: x + y
    total = parse_hex("BABE").apply_right(parse_hex("CAFE").map_right(add))
    print("BABE + CAFE =>", total)                 # Either.Right[99772]

    # A failure short-circuits the pipeline and is logged once
    broken = parse_hex("FEAR").map_right(lambda n: n * 2)
    broken.consume(lambda ex: print("failed =>", type(ex).__name__),
                   lambda n: print("doubled =>", n))

    # Fold both sides into one value
    def describe(e: Either[Exception, int]) -> str:
        return e.fold(lambda ex: f"error:{ex}", lambda n: f"ok:{n}")

    print(describe(right(7)))                      # ok:7
    print(describe(broken))


if __name__ == "__main__":
    main()
