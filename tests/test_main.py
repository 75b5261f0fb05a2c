import unittest
import sys
import os
import io
import contextlib

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from maze_carver.main import build_parser, main

class TestCLI(unittest.TestCase):
    def test_parser_defaults(self):
        args = build_parser().parse_args(["generate"])
        self.assertEqual((args.width, args.height), (20, 20))
        self.assertEqual((args.start_x, args.start_y), (0, 0))
        self.assertEqual(args.delay, 0.05)
        self.assertFalse(args.visual)

    def test_headless_generate(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["generate", "--width", "4", "--height", "3", "--delay", "0", "--seed", "7"])
        self.assertIn("Done. 11 steps.", out.getvalue())

    def test_bad_dimensions_rejected_before_carving(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["generate", "--width", "0"])

    def test_negative_delay_rejected(self):
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                main(["generate", "--delay", "-1"])

    def test_benchmark(self):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            main(["benchmark", "--size", "10"])
        self.assertIn("STEPS/SEC", out.getvalue())
        self.assertIn("99", out.getvalue())

if __name__ == '__main__':
    unittest.main()
