"""Command line inspection of launcher versions.

Provides commands to list known versions, show a version's state and
problems, and apply a version to a fresh launch profile.
"""

import logging
import sys
from pathlib import Path

import click

from .config.loader import load_config
from .errors import VersionError
from .i18n import Catalog
from .i18n import load_catalog
from .patches.profile import LaunchProfile
from .versions.descriptor import VersionDescriptor
from .versions.manifest import VersionList
from .versions.manifest import build_version_list
from .versions.manifest import load_manifest_file

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _load_versions(ctx: click.Context) -> VersionList:
    """Build the version list from the options stored on the context."""
    settings = ctx.obj["settings"]
    catalog = ctx.obj["catalog"]
    manifest_path: Path | None = ctx.obj["manifest_path"]
    manifest = load_manifest_file(manifest_path) if manifest_path else None
    return build_version_list(settings, manifest=manifest, catalog=catalog)


def _get_version(ctx: click.Context, version_id: str) -> VersionDescriptor:
    version = _load_versions(ctx).get(version_id)
    if version is None:
        click.echo(f"Error: Unknown version: {version_id}", err=True)
        sys.exit(1)
    return version


@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path), help="Config file (default: launcher.yaml)")
@click.option("--manifest", "manifest_path", type=click.Path(path_type=Path), help="Version manifest JSON file")
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None, manifest_path: Path | None):
    """Inspect and apply launcher versions."""
    settings = load_config(config_path)
    _configure_logging(settings.log_level)
    catalog = load_catalog(Path(settings.catalog_path)) if settings.catalog_path else Catalog()
    ctx.obj = {
        "settings": settings,
        "catalog": catalog,
        "manifest_path": manifest_path,
    }


@cli.command(name="list")
@click.pass_context
def list_versions(ctx: click.Context):
    """List known versions, newest first."""
    try:
        versions = _load_versions(ctx)
    except VersionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for version in versions:
        label = version.type_label(ctx.obj["catalog"]) or version.release_type or "-"
        click.echo(f"{version.get_order():>4}  {version.descriptor:<16} {version.source.value:<8} {label}")


@cli.command()
@click.argument("version_id")
@click.pass_context
def show(ctx: click.Context, version_id: str):
    """Show a version's source, update state, and problems."""
    try:
        version = _get_version(ctx, version_id)
    except VersionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Version: {version.descriptor}")
    click.echo(f"  Type: {version.type_label(ctx.obj['catalog']) or version.release_type}")
    click.echo(f"  Source: {version.source.value}")
    click.echo(f"  Customizable: {'yes' if version.is_customizable() else 'no'}")
    click.echo(f"  Needs update: {'yes' if version.needs_update() else 'no'}")
    click.echo(f"  Legacy launcher: {'yes' if version.uses_legacy_launcher() else 'no'}")
    click.echo(f"  URL: {version.get_url()}")

    problems = version.get_problems()
    click.echo(f"  Problem severity: {version.get_problem_severity().name}")
    for problem in problems:
        click.echo(f"  [{problem.severity.name}] {problem.message}")


@cli.command()
@click.argument("version_id")
@click.pass_context
def apply(ctx: click.Context, version_id: str):
    """Apply a version to an empty launch profile and print the result."""
    try:
        version = _get_version(ctx, version_id)
        profile = LaunchProfile()
        version.apply_to(profile)
    except VersionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for key, value in profile.to_dict().items():
        click.echo(f"{key}: {value}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
