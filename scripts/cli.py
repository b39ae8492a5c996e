"""
Favicon CLI.

Command-line interface for deriving the favicon set without a server.

Usage:
    python -m scripts.cli export <source> <output_dir> --name "My App"
    python -m scripts.cli inspect <source>
    python -m scripts.cli serve --port 8000
"""

import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from faviconkit import FaviconSetupError, Options, generate
from faviconkit.branding import load_branding
from faviconkit.catalog import ICON_CATALOG
from faviconkit.image_io import decode, transform


console = Console()


def _build_options(
    source: str,
    name: Optional[str],
    apple_touch_icon: Optional[str],
    branding_file: Optional[str],
) -> Options:
    branding = load_branding(Path(branding_file)) if branding_file else {}
    if name is not None:
        branding["name"] = name
    if "name" not in branding:
        raise click.UsageError("An app name is required (--name or name in the branding file)")
    return Options(
        favicon=Path(source).read_bytes(),
        apple_touch_icon=Path(apple_touch_icon).read_bytes() if apple_touch_icon else None,
        **branding,
    )


@click.group()
@click.version_option(version="0.1.0")
def cli():
    """Favicon CLI - derive icons, webmanifest and browserconfig from one image."""
    pass


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_dir", type=click.Path(file_okay=False))
@click.option("--name", "-n", default=None, help="App name for the webmanifest")
@click.option("--apple-touch-icon", default=None, type=click.Path(exists=True, dir_okay=False),
              help="Alternative source for apple-touch-icon.png")
@click.option("--branding", "branding_file", default=None, type=click.Path(exists=True, dir_okay=False),
              help="YAML file with branding fields")
@click.option("--base-path", default="/", help="Path prefix used in the webmanifest (default: /)")
@click.option("--workers", "-w", default=1, type=int, help="Render threads (default: 1)")
def export(
    source: str,
    output_dir: str,
    name: Optional[str],
    apple_touch_icon: Optional[str],
    branding_file: Optional[str],
    base_path: str,
    workers: int,
):
    """Write the full favicon set to OUTPUT_DIR."""
    options = _build_options(source, name, apple_touch_icon, branding_file)
    try:
        assets = generate(options, base_path, max_workers=workers)
    except FaviconSetupError as exc:
        console.print(f"[red]✗ {exc.error_code}: {exc}[/red]")
        sys.exit(1)

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)
    for asset in assets:
        (out / asset.path.lstrip("/")).write_bytes(asset.content)
        console.print(f"  [green]✓[/green] {asset.path.lstrip('/')} [dim]({len(asset.content)} bytes)[/dim]")
    console.print(f"\n[bold green]Wrote {len(assets)} files to {out}[/bold green]")


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def inspect(source: str):
    """Show the icon catalog rendered from SOURCE."""
    try:
        image = decode(Path(source).read_bytes())
    except FaviconSetupError as exc:
        console.print(f"[red]✗ {exc.error_code}: {exc}[/red]")
        sys.exit(1)

    console.print(f"Source: {source} ({image.width}x{image.height}, {image.mode})")
    table = Table(title="Favicon set")
    table.add_column("Name", style="cyan")
    table.add_column("Source")
    table.add_column("Size", justify="right")
    table.add_column("Type")
    table.add_column("Bytes", justify="right")
    try:
        for descriptor in ICON_CATALOG:
            content = transform(image, descriptor.size, descriptor.format)
            table.add_row(
                descriptor.name,
                descriptor.source,
                descriptor.sizes,
                descriptor.mime_type,
                str(len(content)),
            )
    except FaviconSetupError as exc:
        console.print(f"[red]✗ {exc.error_code}: {exc}[/red]")
        sys.exit(1)
    console.print(table)


@cli.command()
@click.option("--host", default=None, help="Bind address (default: HOST setting)")
@click.option("--port", "-p", default=None, type=int, help="Port (default: PORT setting)")
def serve(host: Optional[str], port: Optional[int]):
    """Run the favicon service."""
    import uvicorn

    from app.deps import get_settings

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port
    console.print(f"Serving on http://{host}:{port}")
    uvicorn.run("app.main:create_app", factory=True, host=host, port=port)


if __name__ == "__main__":
    cli()
