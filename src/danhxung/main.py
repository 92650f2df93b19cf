"""
Command line front end:

1) Load a family tree snapshot (JSON) or import one from a GEDCOM file.
2) Build the relation graph.
3) Print how the reference person addresses everyone (or one target).
4) Print raw relation paths, consistency warnings, or convert GEDCOM to JSON.
"""

from pathlib import Path

import click
from loguru import logger

from danhxung import snapshot as snapshot_io
from danhxung.addressing import AddressingEngine
from danhxung.config import settings
from danhxung.gedcom import read_gedcom
from danhxung.log import configure_logging
from danhxung.paths import describe_path
from danhxung.snapshot import Snapshot, export_snapshot
from danhxung.validation import validate_snapshot

MAX_WARNINGS = 10


def load_tree(path: Path, reference: str | None = None) -> Snapshot:
    """Load a JSON snapshot, or import a .ged file."""
    try:
        if path.suffix.lower() == ".ged":
            tree = read_gedcom(path, user_id=reference)
        else:
            tree = snapshot_io.load(path)
    except ValueError as e:  # SnapshotError, or a GEDCOM id without digits
        raise click.BadParameter(str(e), param_hint="SNAPSHOT") from e

    if reference:
        tree.user_id = reference
    return tree


def _engine(tree: Snapshot) -> AddressingEngine:
    if not tree.user_id:
        raise click.UsageError("No reference person: pass --reference or set userId in the snapshot")
    return AddressingEngine(tree.persons, tree.relations, tree.user_id)


def _title_text(title) -> str:
    return getattr(title, "value", title)


@click.group()
@click.option("--log-level", default=settings.log_level, show_default=True, help="Loguru level for stderr.")
def cli(log_level: str) -> None:
    """Vietnamese kinship address terms for a family tree."""
    configure_logging(log_level)


@cli.command("addressing")
@click.argument("snapshot_path", metavar="SNAPSHOT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--reference", help="Person id to address everyone from (defaults to the snapshot's userId).")
@click.option("--target", help="Only show this person.")
def addressing_cmd(snapshot_path: Path, reference: str | None, target: str | None) -> None:
    """Print the address title of every person in SNAPSHOT."""
    tree = load_tree(snapshot_path, reference)
    engine = _engine(tree)

    members = engine.family_members()
    if target:
        members = [m for m in members if m.person.id == target]
        if not members:
            raise click.BadParameter(f"Unknown person id {target}", param_hint="--target")

    for m in members:
        info = m.addressing
        lineage = info.lineage.value if info.lineage else "-"
        click.echo(
            f"{m.person.id}\t{m.person.name}\t{_title_text(info.title)}\t"
            f"gen={info.generation:+d}\t{lineage}\t{info.confidence:.1f}\t{info.explanation}"
        )
        for greeting in info.greeting_examples:
            click.echo(f"\t  {greeting}")


@cli.command("path")
@click.argument("snapshot_path", metavar="SNAPSHOT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("from_id")
@click.argument("to_id")
def path_cmd(snapshot_path: Path, from_id: str, to_id: str) -> None:
    """Print the shortest relation path FROM_ID -> TO_ID."""
    tree = load_tree(snapshot_path)
    engine = AddressingEngine(tree.persons, tree.relations, from_id)

    path = engine.relation_path(from_id, to_id)
    if path is None:
        click.echo(f"No relation path from {from_id} to {to_id}")
        raise SystemExit(1)

    click.echo(f"{len(path)} step(s): {', '.join(path) or '(same person)'}")
    for current, relation_type, nxt in describe_path(engine.graph, path, from_id):
        click.echo(f"  {current} --{relation_type.value}--> {nxt}")


@cli.command("validate")
@click.argument("snapshot_path", metavar="SNAPSHOT", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def validate_cmd(snapshot_path: Path) -> None:
    """Print consistency warnings for SNAPSHOT."""
    tree = load_tree(snapshot_path)
    warnings = validate_snapshot(tree.persons, tree.relations)

    if not warnings:
        click.echo("No validation issues found")
        return

    click.echo(f"Found {len(warnings)} validation warnings:")
    for w in warnings[:MAX_WARNINGS]:
        click.echo(f"  - {w}")
    if len(warnings) > MAX_WARNINGS:
        click.echo(f"  ... and {len(warnings) - MAX_WARNINGS} more")


@cli.command("convert")
@click.argument("gedcom_path", metavar="GEDCOM", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("output_path", metavar="OUT", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--reference", help="Reference person id (defaults to the first individual).")
def convert_cmd(gedcom_path: Path, output_path: Path, reference: str | None) -> None:
    """Import GEDCOM and write it out as a JSON snapshot."""
    tree = load_tree(gedcom_path, reference)
    exported = export_snapshot(tree.persons, tree.relations, tree.user_id)
    snapshot_io.save(exported, output_path)
    logger.info(f"Snapshot written to {output_path}")
    click.echo(f"Wrote {len(exported.persons)} persons and {len(exported.relations)} relations to {output_path}")


if __name__ == "__main__":
    cli()
