#!/usr/bin/env python3
"""
Tests for the duplicate collapser.
"""

import io
import os
import unittest

from helpers import TempDirTestCase
from linekit import InputOpenError, OutputOpenError
from linekit.streams import PipeSource
from linekit.tools.uniq import DuplicateCollapser, collapse, format_run, same_line


def run_collapser(data: bytes, show_counts: bool = False) -> bytes:
    out = io.BytesIO()
    DuplicateCollapser(show_counts).process(PipeSource(io.BytesIO(data)), out)
    return out.getvalue()


class TestCollapse(unittest.TestCase):
    """Run detection."""
    
    def test_newline_insensitive_equality(self):
        self.assertTrue(same_line(b"a\n", b"a"))
        self.assertTrue(same_line(b"a", b"a\n"))
        self.assertTrue(same_line(b"\n", b""))
        self.assertFalse(same_line(b"a\n", b"a \n"))
        self.assertFalse(same_line(b"a\n\n", b"a\n"))
    
    def test_runs(self):
        lines = [b"a\n", b"a\n", b"b\n", b"a\n", b"a"]
        self.assertEqual(list(collapse(lines)), [(2, b"a\n"), (1, b"b\n"), (2, b"a\n")])
    
    def test_empty_input(self):
        self.assertEqual(list(collapse([])), [])
        self.assertEqual(run_collapser(b"", show_counts=True), b"")
    
    def test_counts(self):
        self.assertEqual(run_collapser(b"a\na\nb\n", show_counts=True), b"   2 a\n   1 b\n")
    
    def test_unterminated_last_line_kept_as_read(self):
        self.assertEqual(run_collapser(b"x\ny"), b"x\ny")
        self.assertEqual(run_collapser(b"x\nx"), b"x\n")
    
    def test_format_run(self):
        self.assertEqual(format_run(12, b"z", True), b"  12 z")
        self.assertEqual(format_run(12, b"z\n", False), b"z\n")
    
    def test_collapsing_twice_is_idempotent(self):
        data = b"a\na\n\n\nb\nb\nb\nc\na\na"
        once = run_collapser(data)
        self.assertEqual(run_collapser(once), once)
        counted = run_collapser(once, show_counts=True)
        self.assertTrue(all(line.startswith(b"   1 ") for line in counted.splitlines()))


class TestDuplicateCollapser(TempDirTestCase):
    """Input and output destinations."""
    
    def test_stdin_to_stdout(self):
        stdout = io.BytesIO()
        runs = DuplicateCollapser().run(stdin=io.BytesIO(b"q\nq\n"), stdout=stdout)
        self.assertEqual(runs, 1)
        self.assertEqual(stdout.getvalue(), b"q\n")
    
    def test_output_file_is_appended(self):
        src = self.write_file("in.txt", b"a\na\nb\n")
        dest = self.write_file("out.txt", b"existing\n")
        DuplicateCollapser(show_counts=True).run(src, dest)
        with open(dest, 'rb') as f:
            self.assertEqual(f.read(), b"existing\n   2 a\n   1 b\n")
    
    def test_output_file_created_when_absent(self):
        src = self.write_file("in.txt", b"a\n")
        dest = os.path.join(self.temp_dir, "new.txt")
        DuplicateCollapser().run(src, dest)
        with open(dest, 'rb') as f:
            self.assertEqual(f.read(), b"a\n")
    
    def test_missing_input(self):
        with self.assertRaises(InputOpenError) as ctx:
            DuplicateCollapser().run(self.missing(), stdout=io.BytesIO())
        self.assertEqual(ctx.exception.path, self.missing())
    
    def test_unopenable_output(self):
        src = self.write_file("in.txt", b"a\n")
        dest = os.path.join(self.missing("nowhere"), "out.txt")
        with self.assertRaises(OutputOpenError) as ctx:
            DuplicateCollapser().run(src, dest)
        self.assertEqual(ctx.exception.path, dest)


if __name__ == "__main__":
    unittest.main()
