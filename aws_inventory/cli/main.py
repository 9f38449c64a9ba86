"""Main CLI entry point using Typer."""

import typer
from pathlib import Path
from typing import List, Optional, Tuple
from rich.console import Console
from rich.table import Table

from .. import __version__
from .config import Config
from ..utils.logging import setup_logging
from ..install.errors import (
    HomeDirectoryUnresolvableError,
    ProvisionError,
    SmokeTestError,
)
from ..install.layout import InstallLayout, SourceBundle
from ..install.locator import HomeConfigLocator, user_config_file
from ..install.provisioner import ProvisionResult, Provisioner, run_smoke_test
from ..models.inventory_config import InventoryConfig

# Create Typer app
app = typer.Typer(
    name="aws-inventory",
    help="AWS Infrastructure Inventory Tool",
    add_completion=False,
)

# Create Rich console for output
console = Console()

# Global config
config: Optional[Config] = None


def _version_callback(value: bool):
    if value:
        console.print(f"aws-inventory version {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress output except errors"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
):
    """AWS Infrastructure Inventory Tool."""
    global config

    config = Config.load()

    log_level = "ERROR" if quiet else ("DEBUG" if verbose else config.log_level)
    setup_logging(level=log_level, log_file=config.log_file)

    if no_color:
        console.no_color = True


@app.command()
def version():
    """Show version information."""
    import sys
    import yaml

    console.print(f"aws-inventory version {__version__}")
    console.print(f"Python {sys.version.split()[0]}")
    console.print(f"PyYAML {yaml.__version__}")


def _layout(prefix: Optional[str]) -> InstallLayout:
    return InstallLayout.from_prefix(prefix or config.prefix)


def _print_result(result: ProvisionResult):
    for path in result.placed:
        console.print(f"  Installed: {path}")
    for path in result.written:
        console.print(f"  Created:   {path}", style="green")
    for path in result.skipped:
        console.print(f"  Kept:      {path} (already exists)", style="yellow")


@app.command()
def install(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Install prefix (default: $AWS_INVENTORY_PREFIX or /usr/local)"),
    source: Path = typer.Option(Path("."), "--source", help="Unpacked aws-inventory source tree"),
    assets: str = typer.Option("src", "--assets", help="Directory of supporting sources inside the source tree"),
):
    """Install the executable, sources, man page and default system config."""
    layout = _layout(prefix)
    bundle = SourceBundle(source.expanduser().resolve(), assets=assets)

    try:
        console.print(f"📦 Installing aws-inventory into [bold]{layout.prefix}[/bold]")
        result = Provisioner(layout).install(bundle)
        _print_result(result)
        console.print("\n✓ Install complete!", style="bold green")

    except ProvisionError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=1)


@app.command("post-install")
def post_install(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Install prefix (default: $AWS_INVENTORY_PREFIX or /usr/local)"),
    user_config_dir: Optional[str] = typer.Option(None, "--user-config-dir", help="User config directory (default: ~/.aws-inventory)"),
):
    """Seed the user's config from the system default if it is missing."""
    layout = _layout(prefix)
    locator = HomeConfigLocator(user_config_dir or config.user_config_dir)

    try:
        result = Provisioner(layout, locator).post_install()
        _print_result(result)
        console.print("✓ Post-install complete!", style="bold green")

    except HomeDirectoryUnresolvableError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=3)
    except ProvisionError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=1)


@app.command("test")
def smoke_test(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Install prefix (default: $AWS_INVENTORY_PREFIX or /usr/local)"),
):
    """Run the installed executable with --version and expect success."""
    layout = _layout(prefix)

    try:
        completed = run_smoke_test(layout.executable)
        console.print(f"✓ {completed.stdout.strip() or layout.executable}", style="green")

    except SmokeTestError as e:
        console.print(f"✗ Smoke test failed: {e}", style="bold red")
        raise typer.Exit(code=1)


@app.command()
def doctor():
    """Check that the tools aws-inventory relies on are on PATH."""
    from ..install.dependencies import DECLARED_DEPENDENCIES, find_missing_dependencies

    missing = find_missing_dependencies()

    table = Table(show_header=True, title="Runtime dependencies")
    table.add_column("Formula", style="cyan")
    table.add_column("Executable")
    table.add_column("Found", justify="center")

    for dep in DECLARED_DEPENDENCIES:
        found = dep not in missing
        table.add_row(dep.formula, dep.executable, "✓" if found else "[red]✗[/red]")

    console.print(table)

    if missing:
        console.print(
            f"\n⚠️  Missing: {', '.join(dep.formula for dep in missing)}", style="yellow"
        )
        raise typer.Exit(code=1)


# Config commands group
config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


def _config_candidates(prefix: Optional[str], user_config_dir: Optional[str]) -> List[Tuple[str, Path]]:
    locator = HomeConfigLocator(user_config_dir or config.user_config_dir)
    return [
        ("user", user_config_file(locator)),
        ("system", _layout(prefix).system_config_file),
    ]


@config_app.command("path")
def config_path(
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Install prefix"),
    user_config_dir: Optional[str] = typer.Option(None, "--user-config-dir", help="User config directory"),
):
    """Show where configuration is looked up, in order of precedence."""
    try:
        candidates = _config_candidates(prefix, user_config_dir)
    except HomeDirectoryUnresolvableError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=3)

    table = Table(show_header=True)
    table.add_column("Scope", style="cyan")
    table.add_column("Path")
    table.add_column("Exists", justify="center")

    for scope, path in candidates:
        table.add_row(scope, str(path), "✓" if path.exists() else "")

    console.print(table)


@config_app.command("show")
def config_show(
    path: Optional[Path] = typer.Option(None, "--path", help="Config file to read (default: user, then system)"),
    prefix: Optional[str] = typer.Option(None, "--prefix", help="Install prefix"),
    user_config_dir: Optional[str] = typer.Option(None, "--user-config-dir", help="User config directory"),
):
    """Display the effective configuration."""
    try:
        source = "built-in defaults"
        if path:
            inventory_config = InventoryConfig.load(path)
            source = str(path)
        else:
            inventory_config = InventoryConfig.default()
            for _, candidate in _config_candidates(prefix, user_config_dir):
                if candidate.exists():
                    inventory_config = InventoryConfig.load(candidate)
                    source = str(candidate)
                    break

    except FileNotFoundError:
        console.print(f"✗ Config file '{path}' not found", style="bold red")
        raise typer.Exit(code=1)
    except OSError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=1)
    except HomeDirectoryUnresolvableError as e:
        console.print(f"✗ Error: {e}", style="bold red")
        raise typer.Exit(code=3)
    except ValueError as e:
        console.print(f"✗ {e}", style="bold red")
        raise typer.Exit(code=2)

    console.print(f"\n[bold]Configuration[/bold] ({source})")
    console.print(f"Output format: {inventory_config.output_format}\n")

    table = Table(show_header=True)
    table.add_column("Resource", style="cyan")
    table.add_column("Enabled", justify="center")

    for kind, enabled in inventory_config.resources.items():
        table.add_row(kind, "✓" if enabled else "")

    console.print(table)

    tag_filters = inventory_config.filters.get("tags") or {}
    if tag_filters:
        console.print(f"\nTag filters: {tag_filters}")
    else:
        console.print("\nTag filters: none")


def cli_main():
    """Entry point for console script."""
    app()


if __name__ == "__main__":
    cli_main()
