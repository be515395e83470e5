#!/usr/bin/env python3
"""
Tests for the concatenator.
"""

import unittest

from helpers import TempDirTestCase
from linekit.tools.cat import CatState, Concatenator, NumberingMode, is_blank, render_line


class TestRenderLine(unittest.TestCase):
    """Per-line rendering and state threading."""
    
    def test_blank_detection(self):
        self.assertTrue(is_blank(b"\n"))
        self.assertTrue(is_blank(b"  \t\n"))
        self.assertTrue(is_blank(b""))
        self.assertFalse(is_blank(b" x\n"))
        self.assertTrue(is_blank("\u00a0\u2003\n".encode()))
        self.assertFalse(is_blank(b"\xff\n"))
    
    def test_plain_copy_tracks_blank_flag(self):
        fragment, state = render_line(b"\n", NumberingMode.NONE, False, CatState())
        self.assertEqual(fragment, b"\n")
        self.assertEqual(state, CatState(previous_blank=True, next_number=1))
    
    def test_number_all(self):
        fragment, state = render_line(b"hi\n", NumberingMode.ALL, False, CatState())
        self.assertEqual(fragment, b"     1\thi\n")
        self.assertEqual(state.next_number, 2)
    
    def test_number_nonblank_skips_blank(self):
        fragment, state = render_line(b"\n", NumberingMode.NONBLANK, False, CatState(next_number=4))
        self.assertEqual(fragment, b"\n")
        self.assertEqual(state.next_number, 4)
    
    def test_squeezed_line_leaves_counter_alone(self):
        state = CatState(previous_blank=True, next_number=7)
        fragment, new_state = render_line(b"\n", NumberingMode.ALL, True, state)
        self.assertEqual(fragment, b"")
        self.assertEqual(new_state, state)
    
    def test_unterminated_line_is_not_given_a_newline(self):
        fragment, _ = render_line(b"tail", NumberingMode.ALL, False, CatState())
        self.assertEqual(fragment, b"     1\ttail")


class TestConcatenator(TempDirTestCase):
    """Whole runs over several inputs."""
    
    def test_plain_output_is_byte_identical(self):
        """Without options, output is the inputs concatenated verbatim."""
        chunks = [b"alpha\n\n\n beta", b"\xff\xfe raw\r\n", b""]
        paths = [self.write_file(f"f{i}", c) for i, c in enumerate(chunks)]
        output, report = self.run_tool(Concatenator(on_error=self.errors.append), paths)
        self.assertEqual(output, b"".join(chunks))
        self.assertEqual(report.processed, 3)
        self.assertTrue(report.ok)
    
    def test_squeeze(self):
        path = self.write_file("a.txt", b"x\n\n\ny\n")
        output, _ = self.run_tool(Concatenator(squeeze=True), [path])
        self.assertEqual(output, b"x\n\ny\n")
    
    def test_numbering_continues_across_files(self):
        a = self.write_file("a.txt", b"one\n\n")
        b = self.write_file("b.txt", b"two\n")
        output, _ = self.run_tool(Concatenator(NumberingMode.NONBLANK), [a, b])
        self.assertEqual(output, b"     1\tone\n\n     2\ttwo\n")
    
    def test_blank_run_does_not_span_file_boundary(self):
        """A blank line opening the next input is kept, while numbering carries on."""
        a = self.write_file("a.txt", b"x\n\n")
        b = self.write_file("b.txt", b"\ny\n")
        output, _ = self.run_tool(Concatenator(squeeze=True), [a, b])
        self.assertEqual(output, b"x\n\n\ny\n")
        output, _ = self.run_tool(Concatenator(NumberingMode.ALL, squeeze=True), [a, b])
        self.assertEqual(output, b"     1\tx\n     2\t\n     3\t\n     4\ty\n")
    
    def test_squeeze_within_one_file_after_another(self):
        a = self.write_file("a.txt", b"x\n")
        b = self.write_file("b.txt", b"\n\n\ny\n")
        output, _ = self.run_tool(Concatenator(squeeze=True), [a, b])
        self.assertEqual(output, b"x\n\ny\n")


if __name__ == "__main__":
    unittest.main()
