# topmark:header:start
#
#   project      : UIStream
#   file         : grade.py
#   file_relpath : src/uistream/cli/commands/grade.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""UIStream `grade` command.

Folds each JSONL patch stream into a tree and grades it with the structural
rules (and, with ``--composition``, the composition rules).

Input modes supported:
  * **Paths mode**: one or more FILES, each a complete patch stream.
  * **STDIN**: ``-`` (or no FILES at all) reads a single stream from STDIN.

Examples:
  Grade a recorded stream:

    $ uistream grade session.jsonl

  Grade the normalized tree, including composition rules, as JSON:

    $ cat session.jsonl | uistream grade --normalize --composition --format json -

Exit status is 0 when every evaluated rule passes for every input, 1 otherwise.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from uistream.cli.cli_types import EnumChoiceParam, OutputFormat
from uistream.cli.cmd_common import (
    STDIN_SENTINEL,
    build_engine,
    get_console,
    get_effective_verbosity,
    load_stream,
)
from uistream.cli.exit_codes import ExitCode
from uistream.cli.options import is_quiet, is_verbose

if TYPE_CHECKING:
    from uistream.cli.cmd_common import LoadedStream
    from uistream.cli.console import ClickConsole
    from uistream.grading.report import GradeReport


def render_report_text(
    console: ClickConsole,
    loaded: LoadedStream,
    report: GradeReport,
    *,
    verbose: bool,
) -> None:
    """Print one grade report as aligned human-readable text."""
    header = f"{loaded.source}: {len(loaded.tree)} elements, {loaded.ops_applied} ops"
    if loaded.records_dropped:
        header += f", {loaded.records_dropped} records dropped"
    console.print(console.styled(header, bold=True))

    width = max((len(r.rule) for r in report), default=0)
    for result in report:
        verdict = result.verdict.styled() if console.enable_color else result.verdict.value
        console.print(f"  {result.rule:<{width}}  {verdict}")
        if not result.passed or verbose:
            for violation in result.violations:
                console.print(f"      - {violation}")

    summary = "all rules pass" if report.all_pass else f"{len(report.failed_rules)} rule(s) failed"
    console.print(f"  {summary}")


def report_to_dict(loaded: LoadedStream, report: GradeReport) -> dict[str, Any]:
    """Return the JSON document of one graded input."""
    return {
        "file": loaded.source,
        "elements": len(loaded.tree),
        "opsApplied": loaded.ops_applied,
        "recordsDropped": loaded.records_dropped,
        **report.to_dict(),
    }


@click.command(
    name="grade",
    help="Grade JSONL patch streams against the structural (and composition) rules.",
)
@click.argument("files", nargs=-1, type=str, metavar="[FILES]...")
@click.option(
    "--composition",
    is_flag=True,
    default=False,
    help="Also run the composition rules.",
)
@click.option(
    "--normalize",
    "normalize_first",
    is_flag=True,
    default=False,
    help="Grade the normalized tree instead of the raw one.",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat),
    default=None,
    help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
)
def grade_command(
    *,
    files: tuple[str, ...],
    composition: bool,
    normalize_first: bool,
    output_format: OutputFormat | None,
) -> None:
    """Grade each input stream and exit non-zero when a rule fails.

    Args:
        files (tuple[str, ...]): Input paths; ``-`` or none for STDIN.
        composition (bool): Also evaluate the composition rules.
        normalize_first (bool): Normalize the tree before grading.
        output_format (OutputFormat | None): Text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console = get_console(ctx)
    level = get_effective_verbosity(ctx)
    fmt = output_format or OutputFormat.TEXT

    engine = build_engine(ctx)
    documents: list[dict[str, Any]] = []
    all_pass = True

    for source in files or (STDIN_SENTINEL,):
        loaded = load_stream(ctx, engine, source)
        tree = engine.normalize(loaded.tree) if normalize_first else loaded.tree
        report = engine.grade(tree)
        if composition:
            report = report.merged(engine.grade_composition(tree))
        all_pass = all_pass and report.all_pass

        if fmt == OutputFormat.JSON:
            documents.append(report_to_dict(loaded, report))
        elif not is_quiet(level):
            render_report_text(console, loaded, report, verbose=is_verbose(level))

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(documents, indent=2))

    ctx.exit(ExitCode.SUCCESS if all_pass else ExitCode.FAILURE)
