"""Tests for the converter and the command line entrypoint."""

import contextlib
import io
import os
import sys
import tempfile
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from PIL import Image

from caffconv import DecodeError, ErrorKind, convert_file
from caffconv.cli import main
from caffconv.converter import output_name
from fixtures import animation_block, caff_bytes, ciff_bytes, credits_block, header_block


class WorkdirTestCase(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self._cwd = os.getcwd()
        os.chdir(self._tmp.name)

    def tearDown(self):
        os.chdir(self._cwd)
        self._tmp.cleanup()

    def write(self, name, data):
        with open(name, "wb") as fp:
            fp.write(data)
        return name

    def run_main(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()


class TestConvertFile(WorkdirTestCase):
    def test_output_name(self):
        self.assertEqual(output_name("dir/anim.caff"), "anim.jpg")

    def test_caff_to_jpeg(self):
        self.write("anim.caff", caff_bytes())
        os.mkdir("out")
        with contextlib.redirect_stdout(io.StringIO()):
            path = convert_file("anim.caff", mode="-caff", output_dir="out")
        self.assertEqual(path, os.path.join("out", "anim.jpg"))
        with Image.open(path) as jpeg:
            self.assertEqual(jpeg.size, (2, 2))

    def test_report_is_optional(self):
        self.write("anim.caff", caff_bytes())
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            convert_file("anim.caff", report=False)
        self.assertEqual(out.getvalue(), "")

    def test_invalid_file_writes_nothing(self):
        self.write("bad.caff", caff_bytes(credits_block(), animation_block()))
        with self.assertRaises(DecodeError) as ctx:
            convert_file("bad.caff")
        self.assertEqual(ctx.exception.kind, ErrorKind.MISSING_HEADER)
        self.assertFalse(os.path.exists("bad.jpg"))

    def test_unknown_mode(self):
        self.write("anim.caff", caff_bytes())
        with self.assertRaises(ValueError):
            convert_file("anim.caff", mode="-gif")


class TestMain(WorkdirTestCase):
    def test_caff(self):
        self.write("anim.caff", caff_bytes(
            header_block(),
            credits_block(year=2020, month=7, day=4, hour=12, minute=30, creator=b"Alice"),
            animation_block(ciff_bytes(caption=b"Hi\n", tags=b"x\x00")),
        ))
        code, out, err = self.run_main(["-caff", "anim.caff"])
        self.assertEqual(code, 0, err)
        self.assertTrue(os.path.isfile("anim.jpg"))
        self.assertIn("CAFF Creator: Alice", out)
        self.assertIn("Creation date: 2020.7.4. 12:30", out)
        self.assertIn("CIFF size: 2 x 2", out)
        self.assertIn("Caption: Hi", out)
        self.assertIn("Tags: x", out)
        self.assertIn("[OK] Saved -> anim.jpg", out)

    def test_ciff(self):
        self.write("image.ciff", ciff_bytes(width=5, height=4))
        code, _, err = self.run_main(["-ciff", "image.ciff"])
        self.assertEqual(code, 0, err)
        with Image.open("image.jpg") as jpeg:
            self.assertEqual(jpeg.size, (5, 4))

    def test_output_goes_to_working_directory(self):
        os.mkdir("input")
        self.write(os.path.join("input", "anim.caff"), caff_bytes())
        code, _, _ = self.run_main(["-caff", os.path.join("input", "anim.caff")])
        self.assertEqual(code, 0)
        self.assertTrue(os.path.isfile("anim.jpg"))

    def test_wrong_argument_count(self):
        code, _, err = self.run_main(["-caff"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid number of arguments!", err)
        self.assertEqual(self.run_main([])[0], 1)
        self.assertEqual(self.run_main(["-caff", "a.caff", "b.caff"])[0], 1)

    def test_bad_mode_length(self):
        self.write("anim.caff", caff_bytes())
        code, _, err = self.run_main(["--caff", "anim.caff"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid parameters!", err)

    def test_path_too_short(self):
        self.write("a.caf", caff_bytes())
        code, _, err = self.run_main(["-caff", "a.caf"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid parameters!", err)

    def test_missing_file(self):
        code, _, err = self.run_main(["-caff", "nothing.caff"])
        self.assertEqual(code, 1)
        self.assertIn("Incorrect file path!", err)

    def test_directory_is_not_a_file(self):
        os.mkdir("folder.caff")
        code, _, err = self.run_main(["-caff", "folder.caff"])
        self.assertEqual(code, 1)
        self.assertIn("Incorrect file path!", err)

    def test_mode_must_match_extension(self):
        self.write("anim.caff", caff_bytes())
        code, _, err = self.run_main(["-ciff", "anim.caff"])
        self.assertEqual(code, 1)
        self.assertIn("Invalid parameters!", err)
        self.assertEqual(self.run_main(["-xxxx", "anim.caff"])[0], 1)

    def test_invalid_content(self):
        self.write("anim.caff", caff_bytes(header_block(), header_block(), animation_block()))
        code, _, err = self.run_main(["-caff", "anim.caff"])
        self.assertEqual(code, 1)
        self.assertIn("[ERROR]", err)
        self.assertIn("Multiple header blocks", err)
        self.assertFalse(os.path.exists("anim.jpg"))


if __name__ == "__main__":
    unittest.main()
