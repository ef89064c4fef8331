#!/usr/bin/env python3
"""
mdautogen - Auto-generate marker-delimited regions of Markdown documents

Reads a Markdown document, regenerates every region enclosed by marker
lines, and writes the result out. The document is otherwise copied through
unchanged.

Marker syntax:
    <!-- BEGIN_MDAUTOGEN: code_table('example01.js', 'example01.hpp') -->
    | ...previous output, replaced on every run... |
    <!-- END_MDAUTOGEN -->

Usage:
    mdautogen < README.md > README.new.md

Examples:
    # Regenerate in a pipe
    cat README.md | mdautogen > README.out.md

    # Explicit files, resolving directive paths against docs/
    mdautogen --inputFile README.md --outputFile README.out.md --baseDir docs/

    # Show available generators
    mdautogen --listGenerators

    # Verbose diagnostics on stderr
    mdautogen -vv < README.md > README.out.md
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .config import appsettings
from .lib import __version__, LOG, state_connectToLogger
from .lib.exceptions import DirectiveParseError, UnknownDirectiveError
from .lib.generators import GeneratorRegistry
from .lib.rewriter import Rewriter, lines_split, lines_write
from .models import ProgramState, RewriteStats, pipeline


# Define CLI arguments
parser = ArgumentParser(
    prog="mdautogen",
    description="mdautogen - regenerate marker-delimited regions of Markdown documents",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--inputFile", default="-", type=str, help="Document to rewrite ('-' reads stdin)"
)

parser.add_argument(
    "--outputFile", default="-", type=str, help="Rewritten document ('-' writes stdout)"
)

parser.add_argument(
    "--baseDir",
    default=None,
    type=str,
    help="Directory that file paths in directives are relative to. Defaults to the working directory",
)

parser.add_argument(
    "--listGenerators",
    action="store_true",
    help="List the commands directives may call, then exit",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=0,
    help="Increase stderr diagnostics (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the input file and base directory.

    Returns:
        ProgramState with added fields:
            - inputSource: Resolved input path (None for stdin)
            - baseDirectory: Resolved base directory (None for working dir)
            - envOK: True if environment is valid

    Exits:
        1 if the input file or base directory does not exist
    """
    state = inputstate.copy()

    LOG("Checking environment...", level=2)

    if state.inputFile != "-":
        input_file = Path(state.inputFile)
        if not input_file.is_file():
            print(f"Error: Input file not found: {input_file}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.inputSource = input_file
        LOG(f"Input file: {input_file}", level=2)
    else:
        LOG("Input: stdin", level=2)

    if state.baseDir:
        base_dir = Path(state.baseDir)
        if not base_dir.is_dir():
            print(f"Error: Base directory not found: {base_dir}", file=sys.stderr)
            state.envOK = False
            sys.exit(1)
        state.baseDirectory = base_dir
        LOG(f"Base directory: {base_dir}", level=2)

    state.envOK = True
    return state


def source_read(inputstate: ProgramState) -> ProgramState:
    """
    Read the whole input document.

    Returns:
        ProgramState with added field:
            - sourceText: Document text

    Exits:
        1 if the input file cannot be read
    """
    state = inputstate.copy()

    LOG("Reading document...", level=1)

    try:
        if state.inputSource is None:
            state.sourceText = sys.stdin.read()
        else:
            with open(state.inputSource, "r", encoding="utf-8", newline="") as fh:
                state.sourceText = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading input: {e}", file=sys.stderr)
        sys.exit(1)

    LOG(f"Read {len(state.sourceText)} characters", level=2)
    return state


def document_rewrite(inputstate: ProgramState) -> ProgramState:
    """
    Rewrite the document and stream it to the output.

    Output is written line by line, so on a directive error everything up to
    and including the offending begin marker has already been written.

    Returns:
        ProgramState with added field:
            - rewriteResult: Dict of RewriteStats counters

    Exits:
        1 on a malformed or unknown directive
    """
    state = inputstate.copy()

    LOG("Rewriting document...", level=1)

    rewriter = Rewriter(GeneratorRegistry(base_dir=state.baseDirectory, settings=appsettings), appsettings)
    lines = lines_split(state.sourceText or "")
    stats = RewriteStats()

    try:
        if state.outputFile == "-":
            lines_write(rewriter.lines_rewrite(lines, stats), sys.stdout)
        else:
            with open(state.outputFile, "w", encoding="utf-8", newline="") as sink:
                lines_write(rewriter.lines_rewrite(lines, stats), sink)
    except (DirectiveParseError, UnknownDirectiveError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error writing output: {e}", file=sys.stderr)
        sys.exit(1)

    state.rewriteResult = vars(stats).copy()
    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Log a summary of the rewrite (terminal pipeline stage).

    Exits:
        1 if rewriteResult is None
    """
    state: ProgramState = inputstate.copy()
    if state.rewriteResult is None:
        print("Error: Rewrite did not complete", file=sys.stderr)
        sys.exit(1)

    result = state.rewriteResult
    LOG("Rewrite complete", level=1)
    LOG(f"  Lines read:       {result['lines_read']}", level=1)
    LOG(f"  Lines written:    {result['lines_emitted']}", level=1)
    LOG(f"  Lines replaced:   {result['lines_suppressed']}", level=1)
    LOG(f"  Blocks generated: {result['blocks_generated']}", level=1)
    if result['open_region_line'] is not None:
        LOG(f"  Unclosed region from line {result['open_region_line']}", level=1)
    return state


def generators_show(registry: GeneratorRegistry) -> None:
    """Print the registered generators with usage examples"""
    for spec in registry.generators_list():
        arities = "/".join(str(n) for n in spec.arities) or "any"
        print(f"{spec.name} ({arities} arguments): {spec.description}")
        for example in spec.examples:
            print(f"    {example}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point - rewrite one document.

    Orchestrates the pipeline:
        1. env_check: Validate paths
        2. source_read: Read the document
        3. document_rewrite: Regenerate marked regions, stream output
        4. results_report: Log counters

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        0 on success; failures exit through sys.exit(1)
    """
    options = parser.parse_args(argv)
    state: ProgramState = ProgramState.state_createFromNamespace(options)

    state_connectToLogger(state)

    if state.listGenerators:
        generators_show(GeneratorRegistry())
        return 0

    pipeline(state, env_check, source_read, document_rewrite, results_report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
