#!/usr/bin/env python3
"""
Static Site Build CLI

Builds the portfolio site from a content file and inspects its inputs.

Commands:
    build    - Render every page to the output directory
    check    - Load the content file and report collection sizes
    sanitize - Print the sanitized form of an HTML fragment file

Examples:\n

    build_site.py build                                   # Default content and output

    build_site.py build data/content/site.yaml -o outs/site -s assets/static

    build_site.py check data/content/site.yaml            # Validate content definition

    build_site.py sanitize write-up.html                  # Preview sanitized HTML
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from folio.contexts.content import ContentDefinitionError, load_content_store
from folio.contexts.rendering import build_site
from folio.contexts.templating import sanitize_html
from folio.utils.timestamp import format_timestamp

load_dotenv()
PROJECT_ROOT = Path(os.getenv("PROJECT_ROOT", Path(__file__).resolve().parents[1]))


def display_path(path: Path) -> str:
    """Return path relative to PROJECT_ROOT for cleaner display."""
    try:
        return str(Path(path).relative_to(PROJECT_ROOT))
    except ValueError:
        return str(path)


app = typer.Typer(
    help="Build the static portfolio site and inspect its content",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("build")
def build_command(
    content: Annotated[
        Optional[Path],
        typer.Argument(help="Content YAML file (default: SITE_CONTENT_PATH)"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output directory (default: SITE_OUTPUT_PATH)"),
    ] = None,
    static: Annotated[
        Optional[Path],
        typer.Option("--static", "-s", help="Static asset directory copied to <output>/static"),
    ] = None,
):
    """
    Render every page of the site.

    Examples:\n

        $ build_site.py build                              # Defaults from .env

        $ build_site.py build site.yaml -o public          # Custom content and output
    """
    typer.secho(f"\nBuilding site: {display_path(content) if content else 'default content'}",
                fg=typer.colors.BLUE, bold=True)
    typer.echo("")

    result = build_site(content_path=content, output_dir=output, static_dir=static)

    typer.echo("")
    if result.success:
        typer.secho("✓ Build succeeded", fg=typer.colors.GREEN, bold=True)
        for page_name, page_path in result.pages.items():
            typer.echo(f"  {page_name}: {display_path(page_path)}")
        typer.echo(f"  Built at: {format_timestamp(result.built_at)}")
    else:
        typer.secho(
            f"✗ Build failed with {len(result.errors)} errors", fg=typer.colors.RED, bold=True
        )
        for error in result.errors:
            typer.secho(f"  - {error}", fg=typer.colors.RED)

    if result.log_dir:
        typer.echo(f"  Log: {display_path(result.log_dir / 'render.log')}")
    typer.echo("")

    raise typer.Exit(code=0 if result.success else 1)


@app.command("check")
def check_command(
    content: Annotated[
        Optional[Path],
        typer.Argument(help="Content YAML file (default: SITE_CONTENT_PATH)"),
    ] = None,
):
    """
    Validate the content definition without rendering.

    Examples:\n

        $ build_site.py check data/content/site.yaml
    """
    try:
        store = load_content_store(content)
    except (FileNotFoundError, ContentDefinitionError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Content is valid", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Profile: {store.profile.name} ({store.profile.role})")
    for collection, count in store.counts.items():
        typer.echo(f"  {collection}: {count}")


@app.command("sanitize")
def sanitize_command(
    html_file: Annotated[
        Path,
        typer.Argument(help="HTML fragment file to sanitize"),
    ],
):
    """
    Print the sanitized form of an HTML fragment.

    Examples:\n

        $ build_site.py sanitize write-up.html
    """
    if not html_file.exists():
        typer.secho(f"Error: File not found: {html_file}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    fragment = sanitize_html(html_file.read_text(encoding="utf-8"))
    typer.echo(fragment.html)


if __name__ == "__main__":
    app()
