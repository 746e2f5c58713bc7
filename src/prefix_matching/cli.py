# -*- coding: utf-8 -*-
# type:ignore

"""This package comes with a built-in CLI for matching queries against a prefix file.

.. code-block::

    $ python -m prefix_matching match prefixes.txt "+44 20 7946 0958" "+301 123 456 789"
    +4420
    +

The first positional argument is a line-delimited file with one prefix per line.
If no queries are given, each line from standard input is matched instead:

.. code-block::

    $ cat numbers.txt | prefix-matching match prefixes.txt --json

One line is written per query. With ``--json``, each line is a JSON object with
the query and either the match or ``null``. Otherwise, it's the matched prefix
or an empty line.
"""

import json
import logging
import sys

import click

from .api import DEFAULT_ENCODING, PrefixMatcher, PrefixMatchingError
from .version import get_version

__all__ = [
    "main",
]

PREFIXES_ARGUMENT = click.argument("prefixes", type=click.Path(dir_okay=False))
QUERIES_ARGUMENT = click.argument("queries", nargs=-1)
ENCODING_OPTION = click.option(
    "--encoding",
    default=DEFAULT_ENCODING,
    show_default=True,
    help="The encoding of the prefix file",
)
JSON_OPTION = click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Write one JSON object per query instead of the bare prefix",
)
VERBOSE_OPTION = click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")


def _iter_queries(queries):
    if queries:
        yield from queries
    else:
        for line in click.get_text_stream("stdin"):
            yield line.rstrip("\n")


def _format(query, matcher: PrefixMatcher, as_json: bool) -> str:
    if as_json:
        match = matcher.match(query)
        return json.dumps(
            {"query": query, "match": None if match is None else match.model_dump()},
            ensure_ascii=False,
        )
    return matcher.find_longest_prefix(query) or ""


@click.group()
@click.version_option(get_version())
def main():
    """Run the `prefix_matching` CLI."""


@main.command()
@PREFIXES_ARGUMENT
@QUERIES_ARGUMENT
@ENCODING_OPTION
@JSON_OPTION
@VERBOSE_OPTION
def match(prefixes: str, queries, encoding: str, as_json: bool, verbose: bool):
    """Find the loaded prefix each query starts with."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s - %(message)s")
    try:
        matcher = PrefixMatcher.from_prefixes(prefixes, encoding=encoding)
        for query in _iter_queries(queries):
            click.echo(_format(query, matcher, as_json))
    except PrefixMatchingError as e:
        click.secho(str(e), fg="red", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
