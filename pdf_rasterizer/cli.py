"""
Command-line interface for PDF rasterizer.
"""

import os
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, TextColumn, BarColumn, TimeRemainingColumn, TaskProgressColumn
from rich.table import Table

from pdf_rasterizer import __version__
from pdf_rasterizer.encoders import DEFAULT_FORMAT, DEFAULT_JPEG_QUALITY
from pdf_rasterizer.exceptions import PageConversionError
from pdf_rasterizer.ranges import parse_range
from pdf_rasterizer.rasterizer import DEFAULT_DPI, PDFRasterizer, RasterOptions
from pdf_rasterizer.utils import configure_logging, format_file_size, get_pdf_info, validate_pdf

console = Console()


def _fail(message):
    console.print(f"\n[bold red]✗ Error:[/bold red] {escape(str(message))}")
    sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def cli():
    """
    PDF Rasterizer CLI - Convert a page range of a PDF into PNG or JPEG images.
    """
    pass


@cli.command(name="convert")
@click.argument('pdf_path', type=click.Path(dir_okay=False))
@click.option(
    '--pages', '-p',
    required=True,
    help="Page range, e.g. '1-5' or '1..5'",
    type=str
)
@click.option(
    '--format', '-f', 'output_format',
    default=DEFAULT_FORMAT,
    show_default=True,
    help='Output format: png, jpeg or jpg',
    type=str
)
@click.option(
    '--dpi',
    default=DEFAULT_DPI,
    show_default=True,
    help='Render DPI',
    type=click.IntRange(min=1)
)
@click.option(
    '--dir', '-d', 'output_dir',
    default=None,
    help='Output directory (default: a directory named after the PDF, next to it)',
    type=click.Path(file_okay=False)
)
@click.option(
    '--quality',
    default=DEFAULT_JPEG_QUALITY,
    show_default=True,
    help='JPEG quality (1-100)',
    type=click.IntRange(min=1, max=100)
)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def convert_command(pdf_path, pages, output_format, dpi, output_dir, quality, verbose):
    """
    Convert a page range of a PDF into images.

    Examples:

        pdf-rasterizer convert input.pdf -p 1-5

        pdf-rasterizer convert input.pdf -p 3..4 -f jpg --dpi 300

        pdf-rasterizer convert input.pdf -p 1-10 -d images
    """
    configure_logging(verbose)
    try:
        is_valid, error_msg = validate_pdf(pdf_path)
        if not is_valid:
            _fail(error_msg)

        options = RasterOptions(
            dpi=dpi,
            output_format=output_format,
            jpeg_quality=quality,
        )
        page_range = parse_range(pages)

        console.print(f"\n[bold cyan]Opening PDF file:[/bold cyan] {pdf_path}")
        with PDFRasterizer(pdf_path) as rasterizer:
            info_table = Table(title="PDF Information", show_header=False)
            info_table.add_column("Property", style="cyan")
            info_table.add_column("Value", style="green")

            info_table.add_row("File", os.path.basename(pdf_path))
            info_table.add_row("Pages", str(rasterizer.num_pages))
            info_table.add_row("Size", format_file_size(os.path.getsize(pdf_path)))
            info_table.add_row("Range", str(page_range))
            info_table.add_row("Format", options.output_format)
            info_table.add_row("DPI", str(options.dpi))

            console.print(info_table)

            target = rasterizer.output_target(output_dir)
            console.print(
                f"\n[bold cyan]Converting {len(page_range)} page(s)...[/bold cyan]"
            )

            with Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                TaskProgressColumn(),
                TimeRemainingColumn(),
                console=console
            ) as progress:
                task = progress.add_task("Rendering pages", total=len(page_range))

                def update_progress(current, total):
                    progress.update(task, completed=current)

                created_files = rasterizer.convert_pages(
                    page_range,
                    output_dir=output_dir,
                    options=options,
                    progress_callback=update_progress,
                )

        console.print(f"\n[bold green]✓ Done! Converted {len(created_files)} page(s)[/bold green]")
        console.print(f"[dim]Output directory: {os.path.abspath(target.directory)}[/dim]")

        console.print("\n[bold]Created files:[/bold]")
        sample_size = min(5, len(created_files))
        for file_path in created_files[:sample_size]:
            console.print(f"  • {os.path.basename(file_path)}")

        if len(created_files) > sample_size:
            console.print(f"  ... and {len(created_files) - sample_size} more")

        console.print()

    except PageConversionError as e:
        _fail(f"{e} (stage: {e.stage})")
    except Exception as e:
        _fail(e)


@cli.command(name="info")
@click.argument('pdf_path', type=click.Path(exists=True, dir_okay=False))
def show_info(pdf_path):
    """
    Display information about a PDF file.

    Example:

        pdf-rasterizer info input.pdf
    """
    try:
        is_valid, error_msg = validate_pdf(pdf_path)
        if not is_valid:
            _fail(error_msg)

        info = get_pdf_info(pdf_path)

        table = Table(title=f"PDF Information: {os.path.basename(pdf_path)}")
        table.add_column("Property", style="cyan", no_wrap=True)
        table.add_column("Value", style="green")

        table.add_row("File Path", os.path.abspath(pdf_path))
        table.add_row("File Size", format_file_size(info.file_size))
        table.add_row("Number of Pages", str(info.num_pages))
        table.add_row("Encrypted", "Yes" if info.is_encrypted else "No")

        if info.title:
            table.add_row("Title", info.title)
        if info.author:
            table.add_row("Author", info.author)
        if info.subject:
            table.add_row("Subject", info.subject)
        if info.creator:
            table.add_row("Creator", info.creator)
        if info.producer:
            table.add_row("Producer", info.producer)

        console.print()
        console.print(table)
        console.print()

    except Exception as e:
        _fail(e)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
