"""Tests for the command line interface."""

import json
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from click.testing import CliRunner

from prefix_matching.cli import main
from prefix_matching.version import get_version


class TestCLI(unittest.TestCase):
    """Test the command line interface."""

    def setUp(self) -> None:
        """Set up the test case with a prefix file and a runner."""
        self.directory = TemporaryDirectory()
        self.path = Path(self.directory.name).joinpath("prefixes.txt")
        self.path.write_text("+\n+44\n+4420\nfoo\narandomprefix\n", encoding="utf-8")
        self.runner = CliRunner()

    def tearDown(self) -> None:
        """Tear down the temporary directory."""
        self.directory.cleanup()

    def test_version(self) -> None:
        """Test printing the version."""
        result = self.runner.invoke(main, ["--version"])
        self.assertEqual(0, result.exit_code)
        self.assertIn(get_version(), result.output)

    def test_arguments(self) -> None:
        """Test matching queries given as arguments."""
        result = self.runner.invoke(
            main, ["match", str(self.path), "+44 20 7946 0958", "+301 123 456 789", "bar"]
        )
        self.assertEqual(0, result.exit_code, msg=result.output)
        self.assertEqual("+4420\n+\n\n", result.output)

    def test_stdin(self) -> None:
        """Test matching queries from standard input."""
        result = self.runner.invoke(
            main, ["match", str(self.path)], input="+44 20 7946 0958\nbar\n  f o o  \n"
        )
        self.assertEqual(0, result.exit_code, msg=result.output)
        self.assertEqual("+4420\n\nfoo\n", result.output)

    def test_json(self) -> None:
        """Test writing matches as JSON."""
        result = self.runner.invoke(main, ["match", str(self.path), "--json", "+44 7700", "bar"])
        self.assertEqual(0, result.exit_code, msg=result.output)
        lines = [json.loads(line) for line in result.output.splitlines()]
        self.assertEqual(
            [
                {
                    "query": "+44 7700",
                    "match": {"prefix": "+44", "remainder": "7700", "normalized": "+447700"},
                },
                {"query": "bar", "match": None},
            ],
            lines,
        )

    def test_missing_prefixes(self) -> None:
        """Test that a missing prefix file fails."""
        missing = self.path.with_name("missing.txt")
        result = self.runner.invoke(main, ["match", str(missing), "foo"])
        self.assertEqual(1, result.exit_code)
        self.assertIn("could not load prefixes", result.output)

    def test_invalid_query(self) -> None:
        """Test that a multiline query fails."""
        result = self.runner.invoke(main, ["match", str(self.path), "foo\nbar"])
        self.assertEqual(1, result.exit_code)
        self.assertIn("Multiline input is not supported", result.output)
