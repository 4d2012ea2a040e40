"""
cmscan - C- Scanner Command-Line Interface
==========================================

This module implements the command-line driver for the C- scanner.
It reads one source file and prints every token it contains, one per
line, framed by a banner and a completion message.

Usage Examples
--------------
Scan a file:
    $ cmscan prog.c-

Stop at the first lexical error:
    $ cmscan --stop-on-error prog.c-

Report lexical errors on stderr and fail if there are any:
    $ cmscan --strict prog.c-

Debug logging on stderr:
    $ cmscan -v prog.c-

Output Format
-------------
    Iniciando varredura do arquivo: prog.c-
    -----------------------------------------
    [Tipo: Palavra-Chave, Lexema: int]
    [Tipo: ID, Lexema: x]
    [Tipo: Simbolo, Lexema: ;]
    [Tipo: FIMARQUIVO]
    -----------------------------------------
    Varredura concluida.
"""

import logging
import sys
from typing import Optional

import click

from cminus import __version__
from cminus.cli.errors import ExitCode, handle_cli_exception
from cminus.errors import ErrorCollector, LexicalError, TooManyErrors
from cminus.scanner import (
    MAX_LEXEME_LENGTH,
    CharacterSource,
    Scanner,
    ScannerOptions,
    Token,
)

logger = logging.getLogger(__name__)

SEPARATOR = "-" * 41

USAGE = "Modo de uso: cmscan <arquivo.c->"


# =============================================================================
# Output Helpers
# =============================================================================

def setup_logging(verbose: bool) -> None:
    """Configure logging on stderr based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def format_token(token: Token) -> str:
    """Render a token as one line of scanner output."""
    if token.is_eof():
        return f"[Tipo: {token.category.value}]"
    return f"[Tipo: {token.category.value}, Lexema: {token.lexeme}]"


def _source_line(source: CharacterSource, token: Token) -> Optional[str]:
    """Text of the line a token starts on, if the source still holds it."""
    if token.line == source.line_number:
        return source.current_line
    return None


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_files",
    nargs=-1,
    metavar="ARQUIVO",
    type=click.Path(),
)
@click.option(
    "--max-lexeme",
    type=click.IntRange(min=1),
    default=MAX_LEXEME_LENGTH,
    show_default=True,
    help="Longest number or identifier accepted; longer ones are errors",
)
@click.option(
    "--stop-on-error",
    is_flag=True,
    help="End the scan at the first lexical error (exit code 1)",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Report lexical errors on stderr and exit with code 1 if any",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging on stderr)",
)
@click.version_option(version=__version__, prog_name="cmscan")
def main(
    input_files: tuple[str, ...],
    max_lexeme: int,
    stop_on_error: bool,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Scan a C- source file and print its tokens.

    ARQUIVO is the C- source file (.c-) to scan.

    \b
    Examples:
        cmscan prog.c-                   # Print all tokens
        cmscan --stop-on-error prog.c-   # Stop at the first error
        cmscan --strict prog.c-          # Fail on lexical errors
    """
    setup_logging(verbose)

    if len(input_files) != 1:
        click.echo(USAGE, err=True)
        sys.exit(ExitCode.ERROR)

    input_file = input_files[0]
    options = ScannerOptions(max_lexeme_length=max_lexeme, stop_on_error=stop_on_error)

    # Open before printing anything so a bad path produces no output
    try:
        source = CharacterSource.open(input_file)
    except OSError as e:
        logger.debug(f"open failed: {e}")
        click.echo(f"Erro: Nao foi possivel abrir o arquivo '{input_file}'", err=True)
        sys.exit(ExitCode.ERROR)

    collector = ErrorCollector()
    collecting = strict
    last: Optional[Token] = None

    try:
        with source:
            scanner = Scanner(source, options)

            click.echo(f"Iniciando varredura do arquivo: {input_file}")
            click.echo(SEPARATOR)

            for token in scanner.tokenize():
                click.echo(format_token(token))
                last = token

                if collecting and token.is_error():
                    try:
                        collector.add(
                            LexicalError.from_token(token, _source_line(source, token))
                        )
                    except TooManyErrors:
                        collecting = False

            error_count = scanner.error_count
    except Exception as e:
        handle_cli_exception(e, verbose)

    stopped = last is not None and last.is_error() and stop_on_error

    click.echo(SEPARATOR)
    click.echo("Varredura interrompida." if stopped else "Varredura concluida.")

    logger.debug(f"{input_file}: {error_count} lexical errors")

    if strict and error_count:
        click.echo(collector.report(), err=True)
        if error_count > collector.error_count():
            click.echo(
                f"({error_count - collector.error_count()} more not shown)", err=True
            )
        sys.exit(ExitCode.ERROR)

    if stopped:
        sys.exit(ExitCode.ERROR)


if __name__ == "__main__":
    main()
