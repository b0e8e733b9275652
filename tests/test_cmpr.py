import contextlib
import io
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import cmpr
from cmprlib.settings import Settings

ENGINE_SCRIPT = (
    "import sys\n"
    "data = sys.stdin.buffer.read()\n"
    "sys.stdout.buffer.write(data[::-1] if sys.argv[-1] == '-c' else data)\n"
)


class CmprMainTestCase(unittest.TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.input_path = os.path.join(self.tempdir.name, "data.txt")
        Path(self.input_path).write_bytes(b"hello world")
        self.config_path = os.path.join(self.tempdir.name, "config.yaml")

    def tearDown(self):
        self.tempdir.cleanup()

    def write_engine_config(self, script=ENGINE_SCRIPT):
        script_path = os.path.join(self.tempdir.name, "engine.py")
        Path(script_path).write_text(script)
        Path(self.config_path).write_text(
            "Engine Command:\n"
            + "  - '"
            + sys.executable
            + "'\n"
            + "  - '"
            + script_path
            + "'\n"
            + "Show Progress: false\n"
        )

    def run_main(self, argv):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout):
            status = cmpr.main(argv, settings_path=self.config_path)
        return status, stdout.getvalue()

    def test_help_printed_once(self):
        status, output = self.run_main(["cmpr", "-h", "--help"])
        self.assertEqual(status, 0)
        self.assertEqual(output.count("Usage:"), 1)
        self.assertIn("-o, --out [path]", output)

    def test_invalid_does_nothing(self):
        self.write_engine_config()
        with self.assertLogs("cmpr", level="ERROR") as logs:
            status, output = self.run_main(["cmpr", self.input_path])
        self.assertEqual(status, 0)
        self.assertEqual(output, "")
        self.assertIn("--compress", logs.output[0])
        self.assertFalse(os.path.exists(self.input_path + ".compressed"))

    def test_no_engine_configured(self):
        with self.assertLogs("cmpr", level="INFO") as logs:
            status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 0)
        self.assertTrue(any("Configuration(" in line for line in logs.output))
        self.assertFalse(os.path.exists(self.input_path + ".compressed"))

    def test_compress_to_default_path(self):
        self.write_engine_config()
        status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 0)
        self.assertEqual(
            Path(self.input_path + ".compressed").read_bytes(), b"dlrow olleh"
        )

    def test_decompress_to_given_path(self):
        self.write_engine_config()
        out_path = os.path.join(self.tempdir.name, "out.bin")
        status, _ = self.run_main(["cmpr", "-o", out_path, self.input_path, "-d"])
        self.assertEqual(status, 0)
        self.assertEqual(Path(out_path).read_bytes(), b"hello world")

    def test_missing_input_file(self):
        self.write_engine_config()
        missing = os.path.join(self.tempdir.name, "missing.txt")
        with self.assertLogs("cmpr", level="CRITICAL"):
            status, _ = self.run_main(["cmpr", missing, "-c"])
        self.assertEqual(status, 1)

    def test_engine_failure(self):
        self.write_engine_config("import sys\nsys.exit(2)\n")
        with self.assertLogs("cmpr", level="CRITICAL"):
            status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 1)
        self.assertFalse(os.path.exists(self.input_path + ".compressed"))

    def test_bad_settings(self):
        Path(self.config_path).write_text("just a string\n")
        with self.assertLogs("cmpr", level="CRITICAL"):
            status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 1)

    def test_malformed_settings(self):
        Path(self.config_path).write_text("Engine Command: [unclosed\n")
        with self.assertLogs("cmpr", level="CRITICAL"):
            status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 1)

    def test_empty_suffix_keeps_input(self):
        self.write_engine_config()
        with open(self.config_path, "a") as config_file:
            config_file.write("Compressed Suffix: ''\n")
        with self.assertLogs("cmpr", level="CRITICAL"):
            status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 1)
        self.assertEqual(Path(self.input_path).read_bytes(), b"hello world")

    def test_default_output_never_overwrites_input(self):
        script_path = os.path.join(self.tempdir.name, "engine.py")
        Path(script_path).write_text(ENGINE_SCRIPT)
        settings = Settings(
            engine_command=[sys.executable, script_path],
            compressed_suffix="",
            show_progress=False,
        )
        with mock.patch("cmpr.load_settings", return_value=settings):
            with self.assertLogs("cmpr", level="CRITICAL") as logs:
                status, _ = self.run_main(["cmpr", self.input_path, "-c"])
        self.assertEqual(status, 1)
        self.assertIn("--out", logs.output[0])
        self.assertEqual(Path(self.input_path).read_bytes(), b"hello world")


if __name__ == "__main__":
    unittest.main()
