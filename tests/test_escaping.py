"""
Markdown escaping tests

Covers the per-line escaping applied to file content before it is placed
inside a table cell.
"""

import pytest

from mdautogen.lib.generators import line_escape


class TestLineEscape:
    """Test the colon / angle bracket escaping rule"""

    def test_plain_line_unchanged(self):
        """Lines without special characters pass through untouched"""
        assert line_escape("return 1;") == "return 1;"

    def test_empty_line(self):
        """Empty lines stay empty"""
        assert line_escape("") == ""

    def test_colon_escaped(self):
        """Colons gain a backslash"""
        assert line_escape("a:b") == "a\\:b"

    def test_angle_brackets_escaped(self):
        """Both angle brackets gain a backslash"""
        assert line_escape("Promise<int>") == "Promise\\<int\\>"

    def test_scope_and_template(self):
        """All three rules on one line, every occurrence replaced"""
        assert line_escape("std::vector<std::string>") == "std\\:\\:vector\\<std\\:\\:string\\>"

    def test_existing_backslash_not_doubled(self):
        """Backslashes already in the source are not touched"""
        assert line_escape("\\n") == "\\n"
        assert line_escape("\\:") == "\\\\:"

    def test_stream_operator(self):
        """Repeated brackets are each escaped"""
        assert line_escape('std::cout << "x";') == 'std\\:\\:cout \\<\\< "x";'

    @pytest.mark.parametrize("line", [
        "plain text",
        "    indented(code);",
        "a = [1, 2, 3]  # comment",
        "",
    ])
    def test_lines_without_specials_are_identity(self, line):
        """Escaping is the identity on lines without : < >"""
        assert line_escape(line) == line
