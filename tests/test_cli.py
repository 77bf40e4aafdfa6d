import contextlib
import io
import unittest

from gridmaze.__main__ import main


def run(*argv):
    out, err = io.StringIO(), io.StringIO()
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestCommandLine(unittest.TestCase):

    def test_generate_and_solve(self):
        code, out, _err = run("--width", "4", "--height", "3", "--seed", "7")
        self.assertEqual(code, 0)
        self.assertIn("Maze 4x3, start (0, 0)", out)
        self.assertIn("Path length:", out)

    def test_same_seed_same_output(self):
        args = ("--width", "6", "--height", "5", "--seed", "2", "--algorithm", "backtracker")
        self.assertEqual(run(*args)[1], run(*args)[1])

    def test_custom_start(self):
        code, out, _err = run("--width", "3", "--height", "3", "--seed", "1", "--start", "2", "1")
        self.assertEqual(code, 0)
        self.assertIn("start (2, 1)", out)

    def test_bad_dimensions(self):
        code, _out, err = run("--width", "0", "--seed", "1")
        self.assertEqual(code, 2)
        self.assertIn("must be positive", err)

    def test_start_outside_grid(self):
        code, _out, err = run("--width", "3", "--height", "3", "--start", "5", "0")
        self.assertEqual(code, 2)
        self.assertIn("outside", err)


if __name__ == '__main__':
    unittest.main()
