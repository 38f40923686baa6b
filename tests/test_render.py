import io
import unittest

from repo_stats.exceptions import ResponseFormatError
from repo_stats.models import RepoRecord
from repo_stats.render import (format_header, format_row, format_separator,
                               parse_repositories, render_table)

CANNED = (
    '[{"name":"repo1","language":"Go","created_at":"2020-01-01T00:00:00Z",'
    '"pushed_at":"2020-06-15T00:00:00Z","updated_at":"2020-06-16T00:00:00Z",'
    '"forks_count":3,"stargazers_count":10}]'
)

REPO1_ROW = (
    "repo1                          |      Go      |   2020-01-01 |   2020-06-15 |"
    "   2020-06-16 |   3    |   10   |"
)


def entry(name, language=None, forks=0):
    return {
        "name": name,
        "language": language,
        "created_at": "2021-03-04T12:00:00Z",
        "pushed_at": "2021-03-05T12:00:00Z",
        "updated_at": "2021-03-06T12:00:00Z",
        "forks_count": forks,
        "stargazers_count": 1,
    }


class ParseRepositoriesTest(unittest.TestCase):
    def test_parses_array(self):
        entries = parse_repositories(CANNED)
        self.assertEqual(len(entries), 1)
        self.assertEqual(entries[0]["name"], "repo1")

    def test_invalid_json(self):
        with self.assertRaises(ResponseFormatError):
            parse_repositories("<html>")

    def test_error_object_reports_api_message(self):
        with self.assertRaises(ResponseFormatError) as ctx:
            parse_repositories('{"message": "Not Found", "documentation_url": "x"}')
        self.assertIn("Not Found", str(ctx.exception))


class FormatTest(unittest.TestCase):
    def test_header_and_separator(self):
        self.assertEqual(
            format_header(),
            "Repo Name                      |   Language   |   Created at |    Last push |"
            "  Last update | Forks  | Stars  |"
        )
        self.assertEqual(
            format_separator(),
            "------------------------------ | ------------ | ------------ | ------------ |"
            " ------------ | ------ | ------ |"
        )
        self.assertEqual(len(format_header()), len(format_separator()))

    def test_row(self):
        record = RepoRecord.from_github_entry(parse_repositories(CANNED)[0])
        self.assertEqual(format_row(record), REPO1_ROW)

    def test_language_columns(self):
        rust = format_row(RepoRecord.from_github_entry(entry("a", "Rust")))
        self.assertEqual(rust.split(" | ")[1], "    Rust    ")
        unknown = format_row(RepoRecord.from_github_entry(entry("a")))
        self.assertEqual(unknown.split(" | ")[1], "  Unknown   ")

    def test_long_name_is_not_truncated(self):
        name = "x" * 40
        self.assertTrue(format_row(RepoRecord.from_github_entry(entry(name))).startswith(name + " | "))


class RenderTableTest(unittest.TestCase):
    def test_rows_in_input_order(self):
        out = io.StringIO()
        rows = render_table([entry("b"), entry("a"), entry("c")], out=out)
        lines = out.getvalue().splitlines()
        self.assertEqual(rows, 3)
        self.assertEqual(len(lines), 5)
        self.assertEqual(lines[0], format_header())
        self.assertEqual(lines[1], format_separator())
        self.assertEqual([line.split()[0] for line in lines[2:]], ["b", "a", "c"])

    def test_title_line_for_username(self):
        out = io.StringIO()
        render_table(parse_repositories(CANNED), out=out, username="octocat")
        self.assertEqual(out.getvalue().splitlines(), [
            "Public repo statistics for user octocat:",
            format_header(),
            format_separator(),
            REPO1_ROW,
        ])

    def test_empty_list(self):
        out = io.StringIO()
        self.assertEqual(render_table([], out=out), 0)
        self.assertEqual(len(out.getvalue().splitlines()), 2)

    def test_bad_entry_keeps_earlier_rows(self):
        bad = entry("bad")
        del bad["forks_count"]
        out = io.StringIO()
        with self.assertRaises(ResponseFormatError):
            render_table([entry("good"), bad, entry("never")], out=out)
        lines = out.getvalue().splitlines()
        self.assertEqual(len(lines), 3)
        self.assertTrue(lines[2].startswith("good "))


if __name__ == "__main__":
    unittest.main()
