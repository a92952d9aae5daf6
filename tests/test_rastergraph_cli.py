from __future__ import annotations

import io
from pathlib import Path
import tempfile
import unittest
from unittest import mock

from rastergraph import InvalidPointsError
from rastergraph.cli import main, parse_points


class CliTests(unittest.TestCase):
    def test_parse_points_accepts_commas_spaces_and_comments(self) -> None:
        text = "# header\n1,2\n3 4\n\n5;6  # trailing\n"
        self.assertEqual(parse_points(io.StringIO(text)), [(1.0, 2.0), (3.0, 4.0), (5.0, 6.0)])

    def test_parse_points_reports_line_numbers(self) -> None:
        with self.assertRaisesRegex(InvalidPointsError, "line 2"):
            parse_points(io.StringIO("1 2\n3\n"))
        with self.assertRaisesRegex(InvalidPointsError, "line 1"):
            parse_points(io.StringIO("a b\n"))

    def test_main_writes_bitmap(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "points.txt"
            out = Path(tmp) / "graph.bmp"
            src.write_text("1 1\n2 4\n3 9\n", encoding="utf-8")
            code = main([str(src), "-o", str(out), "--width", "120", "--height", "90"])
            self.assertEqual(code, 0)
            self.assertEqual(out.read_bytes()[:2], b"BM")

    def test_main_reads_stdin(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            out = Path(tmp) / "graph.bmp"
            with mock.patch("sys.stdin", io.StringIO("0 0\n1 1\n")):
                code = main(["-", "-o", str(out)])
            self.assertEqual(code, 0)
            self.assertTrue(out.exists())

    def test_main_reports_graph_errors(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "points.txt"
            out = Path(tmp) / "graph.bmp"
            src.write_text("1 1\n", encoding="utf-8")
            with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
                code = main([str(src), "-o", str(out)])
            self.assertEqual(code, 2)
            self.assertIn("not enough points", err.getvalue())
            self.assertFalse(out.exists())

    def test_main_reports_unwritable_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            src = Path(tmp) / "points.txt"
            src.write_text("0 0\n1 1\n", encoding="utf-8")
            out = Path(tmp) / "missing-dir" / "graph.bmp"
            with mock.patch("sys.stderr", new_callable=io.StringIO) as err:
                code = main([str(src), "-o", str(out)])
            self.assertEqual(code, 2)
            self.assertIn("I/O error", err.getvalue())
            self.assertFalse(out.exists())

    def test_main_reports_missing_file(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            self.assertEqual(main(["/nonexistent/points.txt"]), 2)


if __name__ == "__main__":
    unittest.main()
