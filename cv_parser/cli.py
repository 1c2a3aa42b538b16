"""
Command-line interface for cv-parser.
"""

import logging
import os
import sys
from pathlib import Path

import click
from pypdf import PdfReader
from rich.console import Console
from rich.table import Table

from cv_parser import __version__
from cv_parser.converter import ConversionOptions, convert
from cv_parser.upload import guess_mime_type
from cv_parser.utils import configure_logging, format_file_size

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    cv-parser - Prepare CV documents for LLM extraction.
    """
    pass


@cli.command(name="convert")
@click.argument('input_docx', type=click.Path())
@click.argument('output_pdf', required=False, type=click.Path())
@click.option(
    '--validate/--no-validate',
    default=False,
    help='Reopen the generated PDF and check its page count'
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def convert_command(input_docx, output_pdf, validate, verbose):
    """
    Convert a .docx CV into a plain text PDF.

    Examples:

        cv-parser convert resume.docx

        cv-parser convert resume.docx out/resume.pdf --validate
    """
    configure_logging(logging.DEBUG if verbose else logging.WARNING)
    if output_pdf is None:
        output_pdf = str(Path(input_docx).with_suffix('.pdf'))

    try:
        console.print("\n[bold cyan]Converting DOCX to PDF...[/bold cyan]")
        result = convert(input_docx, output_pdf, ConversionOptions(validate_output=validate))

        table = Table(title="Conversion Result", show_header=False)
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="green")
        table.add_row("Input", os.path.basename(input_docx))
        table.add_row("Output", os.path.abspath(result))
        table.add_row("Size", format_file_size(os.path.getsize(result)))
        console.print(table)

        console.print("\n[bold green]✓ Conversion complete[/bold green]\n")

    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="info")
@click.argument('input_pdf', type=click.Path(exists=True))
def show_info(input_pdf):
    """
    Display information about a PDF file.

    Example:

        cv-parser info resume.pdf
    """
    try:
        reader = PdfReader(input_pdf)

        table = Table(title=f"PDF Information: {os.path.basename(input_pdf)}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", os.path.abspath(input_pdf))
        table.add_row("File Size", format_file_size(os.path.getsize(input_pdf)))
        table.add_row("Number of Pages", str(len(reader.pages)))
        table.add_row("PDF Version", reader.pdf_header)

        console.print()
        console.print(table)
        console.print()

    except Exception as e:
        console.print(f"\n[bold red]✗ Error:[/bold red] {e}")
        sys.exit(1)


@cli.command(name="mime")
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
def show_mime(input_file):
    """
    Print the MIME type used when uploading a file.

    Example:

        cv-parser mime resume.pdf
    """
    console.print(guess_mime_type(input_file))


if __name__ == '__main__':  # pragma: no cover
    cli()
