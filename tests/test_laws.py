import unittest

import hypothesis.strategies as st
from hypothesis import given

from eitherpy import Either, left, right, sort_key


values = st.one_of(st.integers(), st.text(), st.tuples(st.integers(), st.booleans()))
eithers = st.one_of(values.map(left), values.map(right))


def half(n: int) -> Either[str, int]:
    return right(n // 2) if n % 2 == 0 else left(f"odd:{n}")


def positive(n: int) -> Either[str, int]:
    return right(n) if n > 0 else left(f"not positive:{n}")


class TestEitherLaws(unittest.TestCase):
    @given(values, values)
    def test_equal_implies_same_hash(self, a, b):
        for make in (left, right):
            if make(a) == make(b):
                self.assertEqual(hash(make(a)), hash(make(b)))

    @given(values)
    def test_copies_are_equal(self, v):
        self.assertEqual(right(v), right(v))
        self.assertEqual(hash(left(v)), hash(left(v)))
        self.assertNotEqual(left(v), right(v))

    @given(eithers)
    def test_map_identity(self, e):
        self.assertEqual(e.map_right(lambda x: x), e)
        self.assertEqual(e.map_left(lambda x: x), e)

    @given(st.integers())
    def test_flat_map_associativity(self, n):
        e = right(n)
        self.assertEqual(
            e.flat_map_right(half).flat_map_right(positive),
            e.flat_map_right(lambda x: half(x).flat_map_right(positive)),
        )

    @given(eithers)
    def test_fold_round_trip(self, e):
        self.assertEqual(e.fold(Either.left, Either.right), e)

    @given(st.lists(st.one_of(st.integers().map(right), st.text().map(left))))
    def test_sorted_blocks(self, items):
        out = sorted(items, key=sort_key())
        sides = [e.is_right() for e in out]
        self.assertEqual(sides, sorted(sides))
        lefts = [e.get_left() for e in out if e.is_left()]
        rights = [e.get_right() for e in out if e.is_right()]
        self.assertEqual(lefts, sorted(lefts))
        self.assertEqual(rights, sorted(rights))

    @given(st.lists(st.one_of(st.integers().map(right), st.integers().map(left))))
    def test_reverse_direction_mirrors(self, items):
        fwd = sorted(items, key=sort_key())
        rev = sorted(items, key=sort_key(True, True))
        self.assertEqual(rev, list(reversed(fwd)))


if __name__ == "__main__":
    unittest.main()
