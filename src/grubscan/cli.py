"""grubscan CLI, built on Click.

Commands:
  scan   Scan a mounted filesystem for GRUB configs
  parse  Parse a single GRUB config file
  paths  Show the candidate config paths under a directory
"""

from __future__ import annotations

import json
import logging

import click

from grubscan import __version__


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _load_search_paths(paths_file: str | None):
    from grubscan.settings.loader import SearchPathLoader, SearchPaths

    if not paths_file:
        return SearchPaths()
    try:
        return SearchPathLoader().load_file(paths_file)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--paths")


@click.group()
@click.version_option(version=__version__, prog_name="grubscan")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
def cli(verbose: bool) -> None:
    """Find GRUB configs and list their boot entries.

    Understands both legacy GRUB and GRUB2 grub.cfg files.
    """
    _setup_logging(verbose)


@cli.command()
@click.argument("base_dir", type=click.Path(exists=True, file_okay=False))
@click.option("-p", "--paths", "paths_file", type=click.Path(exists=True, dir_okay=False),
              help="YAML file with candidate search paths")
@click.option("--format", "fmt", type=click.Choice(["text", "json"]),
              default="text", help="Output format")
@click.option("-m", "--measurements", type=click.Path(dir_okay=False),
              help="Write SHA-256 digests of every config read to this JSON file")
def scan(base_dir: str, paths_file: str | None, fmt: str,
         measurements: str | None) -> None:
    """Scan BASE_DIR for GRUB configs and list their boot entries."""
    from grubscan.ingest.scanner import GrubConfigScanner
    from grubscan.measure import DigestRecorder

    recorder = DigestRecorder() if measurements else None
    scanner = GrubConfigScanner(measure=recorder,
                                search_paths=_load_search_paths(paths_file))
    entries = scanner.scan(base_dir)
    _display_entries(entries, fmt)

    if recorder is not None:
        recorder.export_json(measurements)
        click.echo(f"\nMeasurements saved: {measurements}", err=True)


@cli.command()
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
@click.option("-d", "--dialect", type=click.Choice(["legacy", "v2"]),
              default="v2", help="GRUB config dialect")
@click.option("-b", "--base-dir", default="/", help="Directory kernel paths are relative to")
@click.option("--format", "fmt", type=click.Choice(["text", "json"]),
              default="text", help="Output format")
def parse(filepath: str, dialect: str, base_dir: str, fmt: str) -> None:
    """Parse a single GRUB config file."""
    from grubscan.ingest.parser import GrubConfigParser

    entries = GrubConfigParser().parse_file(filepath, dialect, base_dir)
    _display_entries(entries, fmt)


@cli.command()
@click.argument("base_dir", type=click.Path(exists=True, file_okay=False))
@click.option("-p", "--paths", "paths_file", type=click.Path(exists=True, dir_okay=False),
              help="YAML file with candidate search paths")
def paths(base_dir: str, paths_file: str | None) -> None:
    """Show candidate config paths under BASE_DIR in scan order."""
    from grubscan.ingest.parser import join_path
    from grubscan.ingest.scanner import GrubConfigScanner

    scanner = GrubConfigScanner(search_paths=_load_search_paths(paths_file))
    found = {path for _, path in scanner.found_configs(base_dir)}
    for dialect, candidate in scanner.search_paths.ordered():
        path = join_path(base_dir, candidate)
        if path in found:
            status = click.style("found  ", fg="green")
        else:
            status = click.style("missing", fg="white")
        click.echo(f"  {status} [{dialect.value:6s}] {path}")


def _printable(value: str) -> str:
    """Replace bytes that were not valid UTF-8 so they can be printed."""
    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _display_entries(entries, fmt: str) -> None:
    if fmt == "json":
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo(click.style("No boot entries found.", fg="yellow"))
        return

    click.echo(f"Boot entries: {len(entries)}")
    for i, entry in enumerate(entries):
        click.echo()
        click.echo(click.style(f"[{i}] {_printable(entry.name)}", bold=True))
        fields = [
            ("kernel", entry.kernel),
            ("args", entry.kernel_args),
            ("initramfs", entry.initramfs),
            ("multiboot", entry.multiboot),
            ("mb args", entry.multiboot_args),
        ]
        for label, value in fields:
            if value:
                click.echo(f"  {label:10s} {_printable(value)}")
        for module in entry.modules:
            click.echo(f"  {'module':10s} {_printable(module)}")


if __name__ == "__main__":
    cli()
