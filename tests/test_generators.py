"""
Generator registry tests

Tests command dispatch, argument checks and the side-by-side table output.
"""

import pytest

from mdautogen.config import AppSettings
from mdautogen.lib.exceptions import DirectiveParseError, FileReadError, UnknownDirectiveError
from mdautogen.lib.generators import GeneratorRegistry
from mdautogen.models import Directive, GeneratorSpec


@pytest.fixture
def sources(tmp_path):
    """Two small source files in a temporary base directory"""
    (tmp_path / "f1.txt").write_text("x", encoding="utf-8")
    (tmp_path / "f2.txt").write_text("y", encoding="utf-8")
    return tmp_path


class TestRegistry:
    """Test registration and lookup"""

    def test_builtin_commands(self):
        """Both table commands are registered, in order"""
        registry = GeneratorRegistry()
        names = [spec.name for spec in registry.generators_list()]
        assert names == ["code_table", "code_table_body"]

    def test_get_unknown_returns_none(self):
        """Lookups of unregistered names return None"""
        registry = GeneratorRegistry()
        assert registry.get("foo_bar") is None
        assert registry.spec_get("foo_bar") is None

    def test_register_with_alias(self):
        """Aliases resolve to the same spec and are listed once"""
        registry = GeneratorRegistry()
        registry.register(GeneratorSpec(
            name="shout",
            description="Upper-case the argument",
            handler=lambda args: args[0].upper(),
            arities=(1,),
            aliases=["yell"],
        ))
        assert registry.dispatch(Directive("yell", ["hi"])) == "HI"
        assert registry.spec_get("yell") is registry.spec_get("shout")
        assert registry.get("yell") is registry.get("shout")
        assert len(registry.generators_list()) == 3

    def test_unknown_directive(self):
        """Unregistered commands raise UnknownDirectiveError carrying the name"""
        registry = GeneratorRegistry()
        with pytest.raises(UnknownDirectiveError) as excinfo:
            registry.dispatch(Directive("foo_bar", ["a", "b"]))
        assert excinfo.value.name == "foo_bar"

    @pytest.mark.parametrize("args", [[], ["a"], ["a", "b", "c"], ["a", "b", "c", "d", "e"]])
    def test_code_table_wrong_arity(self, args):
        """code_table accepts only two or four arguments"""
        registry = GeneratorRegistry()
        with pytest.raises(DirectiveParseError, match="takes 2 or 4 arguments"):
            registry.dispatch(Directive("code_table", args))

    def test_code_table_body_requires_headers(self):
        """code_table_body needs the header arguments"""
        with pytest.raises(DirectiveParseError):
            GeneratorRegistry().dispatch(Directive("code_table_body", ["a", "b"]))


class TestCodeTable:
    """Test the rendered table"""

    def test_two_files_blank_headers(self, sources):
        """Two-argument form renders blank padded headers"""
        registry = GeneratorRegistry(base_dir=sources)
        output = registry.dispatch(Directive("code_table", ["f1.txt", "f2.txt"]))
        assert output == "|  |  |\n|----|----|\n|<pre>x|<pre>y|"

    def test_explicit_headers(self, sources):
        """Four-argument form puts the headers in the first row"""
        registry = GeneratorRegistry(base_dir=sources)
        output = registry.dispatch(Directive("code_table", ["JavaScript", "C++20", "f1.txt", "f2.txt"]))
        assert output.splitlines()[0] == "| JavaScript | C++20 |"
        assert output.splitlines()[2] == "|<pre>x|<pre>y|"

    def test_code_table_body_unpadded_headers(self, sources):
        """code_table_body writes the bare |h1|h2| header row"""
        registry = GeneratorRegistry(base_dir=sources)
        output = registry.dispatch(Directive("code_table_body", ["JS", "C++", "f1.txt", "f2.txt"]))
        assert output == "|JS|C++|\n|----|----|\n|<pre>x|<pre>y|"

    def test_multiline_file_joined_with_breaks(self, tmp_path):
        """Source lines are escaped and joined with <br>, LF or CRLF alike"""
        (tmp_path / "a.hpp").write_text(
            "Promise<int> implicitResolve() {\n  return 1;\n}", encoding="utf-8"
        )
        (tmp_path / "b.js").write_bytes(b"a: 1\r\nb: 2")
        registry = GeneratorRegistry(base_dir=tmp_path)
        row = registry.dispatch(Directive("code_table", ["a.hpp", "b.js"])).splitlines()[2]
        assert row == (
            "|<pre>Promise\\<int\\> implicitResolve() {<br>  return 1;<br>}"
            "|<pre>a\\: 1<br>b\\: 2|"
        )

    def test_trailing_newline_gives_trailing_break(self, tmp_path):
        """A final newline leaves a trailing <br> by default"""
        (tmp_path / "a.txt").write_text("x\n", encoding="utf-8")
        registry = GeneratorRegistry(base_dir=tmp_path)
        assert registry.cell_render("a.txt") == "<pre>x<br>"

    def test_trim_trailing_breaks(self, tmp_path):
        """trim_trailing_breaks drops trailing empty lines"""
        (tmp_path / "a.txt").write_text("x\n\n", encoding="utf-8")
        registry = GeneratorRegistry(base_dir=tmp_path, settings=AppSettings(trim_trailing_breaks=True))
        assert registry.cell_render("a.txt") == "<pre>x"

    def test_empty_file(self, tmp_path):
        """An empty file renders as a bare <pre>"""
        (tmp_path / "empty.txt").write_text("", encoding="utf-8")
        assert GeneratorRegistry(base_dir=tmp_path).cell_render("empty.txt") == "<pre>"

    def test_infer_headers(self, tmp_path):
        """infer_headers names columns after the Pygments language"""
        (tmp_path / "a.py").write_text("x", encoding="utf-8")
        (tmp_path / "b.unknownext").write_text("y", encoding="utf-8")
        registry = GeneratorRegistry(base_dir=tmp_path, settings=AppSettings(infer_headers=True))
        header = registry.dispatch(Directive("code_table", ["a.py", "b.unknownext"])).splitlines()[0]
        assert header == "| Python |  |"


class TestMissingFiles:
    """File read failures render as text in the cell"""

    def test_missing_file_renders_error(self, sources):
        """Missing file shows the read error; the other cell is unaffected"""
        registry = GeneratorRegistry(base_dir=sources)
        row = registry.dispatch(Directive("code_table", ["nope.txt", "f2.txt"])).splitlines()[2]
        first_cell, second_cell = row.strip("|").split("|")
        assert first_cell.startswith("<pre>")
        assert "No such file or directory" in first_cell
        assert second_cell == "<pre>y"

    def test_custom_loader_error(self):
        """The FileReadError message is placed after <pre>"""
        def failing_loader(path, base_dir=None, encoding="utf-8"):
            raise FileReadError(path, f"cannot open {path}")

        registry = GeneratorRegistry(loader=failing_loader)
        assert registry.cell_render("a.txt") == "<pre>cannot open a.txt"
