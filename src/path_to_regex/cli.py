"""Command-line front end: compile a pattern and try paths against it.

Usage:
    path-to-regex "/api/v1/download/:file{.:ext}" /api/v1/download/archive.zip

Exit status is 0 when every PATH matched, 1 when any did not, and 2 when
the pattern itself does not compile.
"""

from __future__ import annotations

import logging
import sys

import click

from path_to_regex._matcher import CaseSensitivity, MatcherError, compile


@click.command()
@click.argument("pattern")
@click.argument("paths", nargs=-1)
@click.option("--ignore-case", "-i", is_flag=True, help="Match paths case-insensitively")
@click.option("--show-regex", is_flag=True, help="Print the generated RE2 pattern")
@click.option("--verbose", "-v", is_flag=True, help="Log compilation details to stderr")
def main(pattern: str, paths: tuple[str, ...], ignore_case: bool, show_regex: bool, verbose: bool) -> None:
    """Compile PATTERN and match each PATH against it."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    sensitivity = CaseSensitivity.CASE_INSENSITIVE if ignore_case else CaseSensitivity.CASE_SENSITIVE
    try:
        matcher = compile(pattern, sensitivity)
    except MatcherError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(2)

    if show_regex:
        click.echo(f"regex: {matcher.regex}")
        click.echo(f"keys: {', '.join(matcher.keys) or '-'}")

    all_matched = True
    for path in paths:
        result = matcher.match(path)
        if not result:
            all_matched = False
            click.echo(f"{path}: no match")
            continue
        click.echo(f"{path}: match")
        for key, value in result.params.items():
            click.echo(f"  {key} = {value!r}")

    sys.exit(0 if all_matched else 1)


if __name__ == "__main__":
    main()
