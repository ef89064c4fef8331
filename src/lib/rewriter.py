"""
Marker-driven stream rewriter

Scans a document line by line for begin/end marker lines and replaces the
region between them with generated content:

    <!-- BEGIN_MDAUTOGEN: code_table('example01.js', 'example01.hpp') -->
    ...anything here is discarded...
    <!-- END_MDAUTOGEN -->

Both marker lines are kept. The block produced by the directive is written
right after the begin marker, and the old region content is dropped.

The begin marker must fill the whole line. The end marker only has to
appear somewhere in the line. A begin marker without a matching end marker
drops the rest of the document.

Example:
    >>> rewriter = Rewriter()
    >>> output = rewriter.text_rewrite(document)
"""

import re
from typing import IO, Iterable, Iterator, List, Optional, Tuple

from ..config import AppSettings, appsettings
from ..models.rewriter import Mode, RewriteStats
from .generators import GeneratorRegistry
from .log import LOG
from .parser import directive_parse

_line_end_re = re.compile(r'(?<=\n)')
_terminator_re = re.compile(r'\r?\n\Z')


def lines_split(text: str) -> List[str]:
    """
    Split text into lines, each keeping its own \\n or \\r\\n terminator

    "".join(lines) rebuilds the text exactly, mixed terminators included.
    The last line has no terminator when the text does not end in one.
    """
    lines = _line_end_re.split(text)
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def terminator_split(line: str) -> Tuple[str, str]:
    """Split a line into (content, terminator); terminator is "" if absent"""
    match = _terminator_re.search(line)
    if match is None:
        return line, ""
    return line[:match.start()], match.group(0)


def lines_write(lines: Iterable[str], sink: IO[str]) -> int:
    """
    Write lines (terminators included) to a text sink

    Lines are written as they are produced, so an exception raised by the
    iterable leaves everything before it in the sink.

    Returns:
        Number of lines written
    """
    count = 0
    try:
        for line in lines:
            sink.write(line)
            count += 1
    finally:
        sink.flush()
    return count


class Rewriter:
    """
    Line scanner that replaces marker-delimited regions with generated text

    Attributes:
        registry: GeneratorRegistry that directives are dispatched to
        settings: Marker configuration
        begin_pattern: Full-line pattern for begin markers (group 1: directive)
    """

    def __init__(
        self,
        registry: Optional[GeneratorRegistry] = None,
        settings: Optional[AppSettings] = None,
    ) -> None:
        self.settings = settings or appsettings
        self.registry = registry or GeneratorRegistry(settings=self.settings)
        self.begin_pattern = self.settings.beginPattern_make()

    def begin_match(self, line: str) -> Optional[str]:
        """Directive text if line is a begin marker, else None"""
        match = self.begin_pattern.match(line)
        return match.group(1) if match else None

    def end_is(self, line: str) -> bool:
        """Check if line contains the end marker"""
        return self.settings.end_marker in line

    def lines_rewrite(
        self, lines: Iterable[str], stats: Optional[RewriteStats] = None
    ) -> Iterator[str]:
        """
        Rewrite a sequence of lines

        Args:
            lines: Input lines in order, each with its own terminator
                   (as produced by lines_split)
            stats: Optional counters updated as lines are consumed

        Yields:
            Output lines with terminators. Input lines keep their own
            terminator; generated lines take the begin marker's.

        Raises:
            DirectiveParseError: malformed directive in a begin marker
            UnknownDirectiveError: directive names an unregistered command

            Both are raised after the begin marker line has been yielded.
        """
        stats = stats if stats is not None else RewriteStats()
        mode = Mode.PASSTHROUGH
        region_start = None
        newline = "\n"

        for line_number, line in enumerate(lines, start=1):
            stats.lines_read += 1
            content, terminator = terminator_split(line)
            if terminator:
                newline = terminator

            directive_text = self.begin_match(content)
            if directive_text is not None:
                LOG(f"Begin marker on line {line_number}", level=2)
                stats.lines_emitted += 1
                # Last line of the input: the block still needs a line of its own
                yield line if terminator else line + newline

                block = self.registry.dispatch(directive_parse(directive_text))
                stats.blocks_generated += 1
                block_lines = block.split("\n")
                for index, block_line in enumerate(block_lines, start=1):
                    stats.lines_emitted += 1
                    if terminator or index < len(block_lines):
                        yield block_line + (terminator or newline)
                    else:
                        yield block_line

                mode = Mode.SUPPRESSED
                region_start = line_number
                continue

            if self.end_is(content):
                LOG(f"End marker on line {line_number}", level=2)
                stats.lines_emitted += 1
                yield line
                mode = Mode.PASSTHROUGH
                region_start = None
                continue

            if mode is Mode.SUPPRESSED:
                stats.lines_suppressed += 1
                continue

            if self.settings.begin_marker in content:
                LOG(f"Line {line_number} mentions the begin marker but is not one; kept as text", level=2)
            stats.lines_emitted += 1
            yield line

        if mode is Mode.SUPPRESSED:
            stats.open_region_line = region_start
            LOG(
                f"Region opened on line {region_start} has no end marker; "
                "the rest of the document was dropped",
                level=1,
            )

    def text_rewrite(self, text: str, stats: Optional[RewriteStats] = None) -> str:
        """
        Rewrite a whole document held in a string

        Every copied line keeps the terminator it had in the input.
        """
        return "".join(self.lines_rewrite(lines_split(text), stats))


def text_rewrite(text: str, base_dir: Optional[str] = None) -> str:
    """Rewrite text with the default settings and generators"""
    return Rewriter(GeneratorRegistry(base_dir=base_dir)).text_rewrite(text)
