from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from . import config
from .errors import LayoutError
from .pipeline.generate import generate
from .pipeline.render_preview import render_previews
from .pipeline.variants import get_variant, variant_for_page_size, variant_names
from .storage import output_path

app = typer.Typer(help="Printable grid notebook generator")
logger = logging.getLogger(__name__)


@app.command(name="generate")
def generate_cmd(
    title: str = typer.Argument(..., help="Document title, also used for the output filename"),
    pages: int = typer.Option(10, "--pages", help="Number of grid pages"),
    author: str = typer.Option("", "--author", help="Author name"),
    subject: str = typer.Option("", "--subject", help="Subject name"),
    course: str = typer.Option("", "--course", help="Course name"),
    copyright_: str = typer.Option("", "--copyright", help="Copyright holder"),
    contacts: str = typer.Option("", "--contacts", help="Contact line"),
    cornell: bool = typer.Option(True, "--cornell/--no-cornell", help="Draw Cornell rules"),
    title_page: bool = typer.Option(True, "--title-page/--no-title-page", help="Add a title page"),
    variant: Optional[str] = typer.Option(None, "--variant", help="Layout variant (default depends on page size)"),
    page_size: str = typer.Option("a4", "--page-size", help="Page size: " + ", ".join(config.PAGE_SIZES)),
    font: Optional[Path] = typer.Option(None, "--font", help="TrueType font file"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output directory"),
    previews: bool = typer.Option(False, "--previews", help="Also write PNG previews"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    if out:
        config.set_out_dir(out)
    size_name = page_size.lower()
    size = config.PAGE_SIZES.get(size_name)
    if size is None:
        typer.echo(f"Unknown page size: {page_size}", err=True)
        raise typer.Exit(code=2)

    pdf_path = output_path(title)
    try:
        document = generate(
            pdf_path,
            title,
            pages,
            author,
            subject,
            course,
            copyright_,
            contacts,
            draw_cornell=cornell,
            generate_title=title_page,
            variant=variant or variant_for_page_size(size_name),
            page_size=size,
            font_path=font,
        )
    except LayoutError as exc:
        logger.exception("Generation failed for %s", title)
        typer.echo(f"FAILED: {exc}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Wrote {pdf_path}")

    if previews:
        for path in render_previews(pdf_path, document):
            typer.echo(f"Preview {path}")


@app.command(name="variants")
def variants_cmd() -> None:
    for key in variant_names():
        layout = get_variant(key)
        typer.echo(f"{key}: {layout.description}")


if __name__ == "__main__":
    app()
