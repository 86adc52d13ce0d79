import json

import click

from anagrammer.dictionary import load_dictionary
from anagrammer.occurrences import sentence_occurrences, word_occurrences
from anagrammer.solver import Solver


DEFAULT_DICTIONARY = "/usr/share/dict/words"


@click.group(invoke_without_command=True)
@click.version_option()
@click.option(
    "-d",
    "--dictionary",
    default=DEFAULT_DICTIONARY,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="path to a word list with one word per line",
)
@click.option("-v", "--verbose", is_flag=True)
@click.pass_context
def cli(ctx: click.Context, dictionary: str, verbose: bool):
    """find every sentence of dictionary words that is an anagram of another sentence

    Options of anagrammer must occur before any subcommands. Subcommands may have
    their own options, which must be provided after the subcommand.
    """
    ctx.ensure_object(dict)
    ctx.obj["DICTIONARY"] = dictionary
    ctx.obj["VERBOSE"] = verbose

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
    elif verbose:
        click.echo("General configuration:")
        click.echo(f"  * dictionary: {dictionary}")


def build_solver(ctx: click.Context, **kwargs) -> Solver:
    """Load the dictionary named on the command line and index it. The dictionary is
    only read by the subcommands that need it."""
    path = ctx.obj["DICTIONARY"]
    try:
        vocabulary = load_dictionary(path)
    except OSError as e:
        raise click.FileError(path, hint=e.strerror) from e
    return Solver(vocabulary, **kwargs)


def format_occurrences(occurrences) -> str:
    return " ".join(f"{letter}:{count}" for letter, count in occurrences)


@cli.command()
@click.argument("words", nargs=-1)
def occurrences(words: tuple):
    """Show how often each letter occurs in WORDS

    Case is ignored, as is anything that is not a letter.
    """
    click.echo(format_occurrences(sentence_occurrences(words)))


@cli.command()
@click.argument("word")
@click.option(
    "--fits",
    is_flag=True,
    help="List every dictionary word that can be spelled with letters from WORD",
)
@click.pass_context
def words(ctx: click.Context, word: str, fits: bool):
    """List the dictionary words that are anagrams of WORD"""
    solver = build_solver(ctx)
    if fits:
        found = list(solver.compute_valid_vocab(word_occurrences(word)))
    else:
        found = solver.word_anagrams(word)

    if ctx.obj["VERBOSE"]:
        click.echo(f"{len(found)} words for {format_occurrences(word_occurrences(word))}")
    for w in found:
        click.echo(w)


@cli.command()
@click.argument("words", nargs=-1)
@click.option(
    "-n",
    "--limit",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of anagrams to show",
)
@click.option(
    "--max-time",
    type=float,
    default=None,
    help="Stop searching after this many seconds",
)
@click.option(
    "-w",
    "--workers",
    type=click.IntRange(min=1),
    default=1,
    show_default=True,
    help="Number of processes to search with",
)
@click.option(
    "--json",
    "json_output",
    is_flag=True,
    help="Format the output as JSON",
)
@click.pass_context
def sentences(
    ctx: click.Context,
    words: tuple,
    limit: int,
    max_time: float,
    workers: int,
    json_output: bool,
):
    """Find every sentence of dictionary words that uses exactly the letters of WORDS

    The anagrams may have a different number of words than WORDS. The same words in a
    different order count as different anagrams.
    """
    sentence = " ".join(words).split()
    solver = build_solver(ctx, max_results=limit, max_time=max_time, workers=workers)

    if ctx.obj["VERBOSE"]:
        click.echo(f"Assembling anagrams from: {format_occurrences(sentence_occurrences(sentence))}")
        click.echo(f"  * workers: {workers}")
        if limit is not None:
            click.echo(f"  * limit: {limit}")
        if max_time is not None:
            click.echo(f"  * max time: {max_time}")

    found = solver.solve(sentence)
    if len(found) == 0:
        click.echo(f"No anagrams found for '{' '.join(sentence)}'")
        ctx.exit(1)

    if json_output:
        click.echo(json.dumps(found))
    else:
        for s in found:
            click.echo(" ".join(s))


cli.add_command(occurrences)
cli.add_command(words)
cli.add_command(sentences)
