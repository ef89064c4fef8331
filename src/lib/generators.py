"""
Generator implementations for mdautogen

Each generator renders the text that replaces a marker-delimited region.
Directives are dispatched by name through GeneratorRegistry; there is no
evaluation of arbitrary expressions.
"""

import re
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from pygments.lexers import get_lexer_for_filename
from pygments.util import ClassNotFound

from ..config import AppSettings, appsettings
from ..models.directives import Directive, GeneratorSpec
from .exceptions import DirectiveParseError, FileReadError, UnknownDirectiveError
from .loader import file_read
from .log import LOG

_line_split_re = re.compile(r'\r?\n')

# Applied in order; none of the replacements introduce a later search character
_md_escapes = (
    (':', '\\:'),
    ('<', '\\<'),
    ('>', '\\>'),
)


def line_escape(line: str) -> str:
    """
    Escape characters Markdown renderers would otherwise interpret

    Example:
        >>> line_escape("std::vector<int>")
        'std\\\\:\\\\:vector\\\\<int\\\\>'
    """
    for search, replacement in _md_escapes:
        line = line.replace(search, replacement)
    return line


class GeneratorRegistry:
    """
    Registry of generator specifications and handlers

    Maps command names to GeneratorSpec objects containing metadata and the
    rendering function invoked for a directive.
    """

    def __init__(
        self,
        base_dir: Optional[Union[str, Path]] = None,
        settings: Optional[AppSettings] = None,
        loader: Optional[Callable[..., str]] = None,
    ) -> None:
        """
        Initialize the registry and register all built-in generators

        Args:
            base_dir: Directory that relative file paths are resolved against
            settings: Settings to use instead of the module singleton
            loader: File reading function, defaults to file_read
        """
        self.specs: Dict[str, GeneratorSpec] = {}
        self.base_dir = base_dir
        self.settings = settings or appsettings
        self.loader = loader or file_read
        self.tableGenerators_register()

    def register(self, spec: GeneratorSpec) -> None:
        """Register a generator specification under its name and aliases"""
        self.specs[spec.name] = spec
        for alias in spec.aliases:
            self.specs[alias] = spec

    def spec_get(self, name: str) -> Optional[GeneratorSpec]:
        """Get full generator specification by name"""
        return self.specs.get(name)

    def get(self, name: str) -> Optional[Callable[[List[str]], str]]:
        """Get generator handler by name, or None if not registered"""
        spec = self.spec_get(name)
        return spec.handler if spec else None

    def generators_list(self) -> List[GeneratorSpec]:
        """All registered generators, each listed once, in registration order"""
        unique: List[GeneratorSpec] = []
        for spec in self.specs.values():
            if spec not in unique:
                unique.append(spec)
        return unique

    def dispatch(self, directive: Directive) -> str:
        """
        Render the text for a directive

        Args:
            directive: Parsed directive from a begin marker

        Returns:
            Generated block, to be written verbatim

        Raises:
            UnknownDirectiveError: command name is not registered
            DirectiveParseError: argument count is not one the command accepts
        """
        spec = self.spec_get(directive.name)
        if spec is None:
            raise UnknownDirectiveError(directive.name)

        if not spec.arity_accepts(len(directive.args)):
            accepted = " or ".join(str(n) for n in spec.arities)
            raise DirectiveParseError(
                f"{directive.name}() takes {accepted} arguments, got {len(directive.args)}"
            )

        LOG(f"Dispatching {directive.name}{tuple(directive.args)}", level=2)
        return spec.handler(directive.args)

    def cell_render(self, path: str) -> str:
        """
        Render one file as a table cell

        The file's lines are escaped and joined with <br> after a leading
        <pre>. A file that cannot be read renders as <pre> followed by the
        error text instead.
        """
        try:
            content = self.loader(path, base_dir=self.base_dir, encoding=self.settings.encoding)
        except FileReadError as e:
            LOG(f"Could not read {path}: {e}", level=1)
            return "<pre>" + str(e)

        lines = _line_split_re.split(content)
        if self.settings.trim_trailing_breaks:
            while len(lines) > 1 and lines[-1] == "":
                lines.pop()

        return "<pre>" + "<br>".join(line_escape(line) for line in lines)

    def header_infer(self, path: str) -> str:
        """Language name Pygments associates with a file name, or blank"""
        try:
            return get_lexer_for_filename(Path(path).name).name
        except ClassNotFound:
            return ""

    def table_render(
        self, header1: str, header2: str, path1: str, path2: str, padded: bool = True
    ) -> str:
        """
        Render two files side by side as a two-column Markdown table

        Header cells are padded with one space each side unless padded is
        False, which gives the bare "|h1|h2|" row of code_table_body.
        """
        pad = " " if padded else ""
        return (
            f"|{pad}{header1}{pad}|{pad}{header2}{pad}|\n"
            "|----|----|\n"
            f"|{self.cell_render(path1)}|{self.cell_render(path2)}|"
        )

    def tableGenerators_register(self) -> None:
        """Register the side-by-side table generators"""

        def code_table_handler(args: List[str]) -> str:
            """Handle code_table(path1, path2) and code_table(header1, header2, path1, path2)"""
            if len(args) == 4:
                header1, header2, path1, path2 = args
            else:
                path1, path2 = args
                header1 = header2 = ""
                if self.settings.infer_headers:
                    header1 = self.header_infer(path1)
                    header2 = self.header_infer(path2)
            return self.table_render(header1, header2, path1, path2)

        def code_table_body_handler(args: List[str]) -> str:
            """Handle code_table_body(header1, header2, path1, path2)"""
            return self.table_render(*args, padded=False)

        self.register(GeneratorSpec(
            name='code_table',
            description='Two files side by side in a two-column table',
            handler=code_table_handler,
            arities=(2, 4),
            examples=[
                "code_table('example01.js', 'example01.hpp')",
                "code_table('JavaScript', 'C++20', 'example01.js', 'example01.hpp')",
            ]
        ))

        self.register(GeneratorSpec(
            name='code_table_body',
            description='Two files side by side under unpadded column headers',
            handler=code_table_body_handler,
            arities=(4,),
            examples=["code_table_body('JavaScript', 'C++20', 'example01.js', 'example01.hpp')"]
        ))
