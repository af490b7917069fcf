import io
import json
import unittest
from contextlib import redirect_stderr

from eitherpy import (
    Either, left, right, of, of_checked, lift, lift_checked,
    from_option, from_option_else, Some, NONE, ConsoleLogger,
    InvalidArgument, TypeMismatch,
)


def parse_hex(s: str) -> int:
    return int(s, 16)


def assert_positive(i: int) -> int:
    assert i > 0
    return i


class Fatal(BaseException):
    pass


def die():
    raise Fatal("fatal")


class TestOfSupplier(unittest.TestCase):
    def test_of(self):
        self.assertEqual(of(lambda: parse_hex("A")), right(10))
        self.assertTrue(isinstance(of(lambda: parse_hex("X")).get_left(), ValueError))
        self.assertEqual(Either.of(lambda: 1), right(1))

    def test_of_lets_base_exceptions_through(self):
        with self.assertRaises(Fatal):
            of(die)

    def test_of_captures_none_result(self):
        self.assertTrue(isinstance(of(lambda: None).get_left(), InvalidArgument))

    def test_of_checked(self):
        self.assertEqual(of_checked(lambda: parse_hex("A")), right(10))
        self.assertTrue(isinstance(of_checked(die).get_left(), Fatal))
        self.assertTrue(isinstance(Either.of_checked(lambda: parse_hex("X")).get_left(), ValueError))

    def test_none_supplier(self):
        with self.assertRaises(InvalidArgument):
            of(None)
        with self.assertRaises(InvalidArgument):
            of_checked(None)


class TestFromOption(unittest.TestCase):
    def test_from_option(self):
        self.assertEqual(from_option(Some(10), "Foo"), right(10))
        self.assertEqual(from_option(NONE, "Foo"), left("Foo"))
        self.assertEqual(Either.from_option(Some(10), None), right(10))
        with self.assertRaises(InvalidArgument):
            from_option(None, "Foo")
        with self.assertRaises(InvalidArgument):
            from_option(NONE, None)
        with self.assertRaises(TypeMismatch):
            from_option(10, "Foo")

    def test_from_option_else(self):
        self.assertEqual(from_option_else(Some(10), lambda: "Foo"), right(10))
        self.assertEqual(from_option_else(NONE, lambda: "Foo"), left("Foo"))
        with self.assertRaises(InvalidArgument):
            from_option_else(NONE, None)
        with self.assertRaises(InvalidArgument):
            from_option_else(NONE, lambda: None)


class TestLift(unittest.TestCase):
    def test_lift(self):
        lifted = lift(parse_hex)
        self.assertEqual(lifted("BABE").get_right(), 0xBABE)
        self.assertTrue(isinstance(lifted("FEAR").get_left(), ValueError))
        self.assertEqual(lifted.__name__, "parse_hex")
        with self.assertRaises(InvalidArgument):
            lift(None)

    def test_lift_passes_arguments(self):
        self.assertEqual(lift(int)("ff", base=16), right(255))

    def test_lift_checked(self):
        self.assertEqual(lift_checked(assert_positive)(1).get_right(), 1)
        self.assertEqual(Either.lift_checked(lambda: die())().get_left().args, ("fatal",))
        with self.assertRaises(InvalidArgument):
            lift_checked(None)

    def test_lift_only_catches_exceptions(self):
        with self.assertRaises(Fatal):
            Either.lift(die)()


class TestCaptureLogging(unittest.TestCase):
    def test_silent_without_logger(self):
        buf = io.StringIO()
        with redirect_stderr(buf):
            of(lambda: parse_hex("X"))
            of_checked(die)
        self.assertEqual(buf.getvalue(), "")

    def test_logs_captured_exception(self):
        buf = io.StringIO()
        logger = ConsoleLogger(json_output=True)
        with redirect_stderr(buf):
            lift(parse_hex, logger=logger)("FEAR")
            lift(parse_hex, logger=logger)("BEEF")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        rec = json.loads(lines[0])
        self.assertEqual(rec["level"], "WARN")
        self.assertEqual(rec["fields"]["op"], "lift")
        self.assertEqual(rec["fields"]["exc_type"], "ValueError")

    def test_fatal_logs_at_error(self):
        buf = io.StringIO()
        logger = ConsoleLogger(stream=buf).bind(component="loader")
        of_checked(die, logger=logger)
        line = buf.getvalue().strip()
        self.assertIn("ERROR: captured Fatal: fatal", line)
        self.assertIn("component=loader", line)
        self.assertIn("op=of_checked", line)

    def test_level_filter(self):
        buf = io.StringIO()
        logger = ConsoleLogger(level="error", stream=buf)
        of(lambda: parse_hex("X"), logger=logger)
        self.assertEqual(buf.getvalue(), "")
        logger.set_level("DEBUG")
        self.assertEqual(logger.level_name, "DEBUG")
        of(lambda: parse_hex("X"), logger=logger)
        self.assertIn("WARN", buf.getvalue())


if __name__ == "__main__":
    unittest.main()
