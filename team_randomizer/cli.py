"""Command-line interface for Team Randomizer."""

import logging
import random
import sqlite3 as sql
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

import team_randomizer.db as db
from team_randomizer.config import Config
from team_randomizer.persistence import PersistenceBridge
from team_randomizer.session import TeamRandomizer
from team_randomizer.validators import validate_member_names


def open_session(ctx: click.Context, conn: sql.Connection, rng: Optional[random.Random] = None) -> TeamRandomizer:
  config: Config = ctx.obj["config"]
  return TeamRandomizer(config, PersistenceBridge(conn, config.storage_key), rng=rng)

@click.group()
@click.option("--config", "config_file", type=click.Path(path_type=Path), default=None,
              help="YAML configuration file")
@click.option("--db", "db_file", type=click.Path(path_type=Path), default=None,
              help="Roster database file (overrides storage.path)")
@click.option("--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_file: Optional[Path], db_file: Optional[Path], verbose: bool):
  """Team Randomizer CLI for managing a roster and drawing random teams."""
  logging.basicConfig(
    level=logging.DEBUG if verbose else logging.WARNING,
    format="%(levelname)s %(name)s: %(message)s",
  )

  config = Config()
  if config_file is not None:
    try:
      config.load_from_file(config_file)
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
      click.secho(f"Error: {e}", fg="red")
      sys.exit(1)

  if db_file is not None:
    config.storage_path = db_file

  ctx.ensure_object(dict)
  ctx.obj["config"] = config

@cli.command()
@click.pass_context
def init(ctx: click.Context):
  """Initialize the roster database."""
  db_file = ctx.obj["config"].storage_path
  with sql.connect(db_file) as conn:
    db.ensure_storage(conn)
    dropped = db.keys(conn)
    if dropped:
      click.secho(f"Dropping stored keys: {', '.join(dropped)}", fg="yellow")
    db.truncate_storage(conn)
    click.secho(f"Initialized database {db_file}", fg="green")

@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, names: tuple[str, ...]):
  """Add members to the roster."""
  with sql.connect(ctx.obj["config"].storage_path) as conn:
    session = open_session(ctx, conn)
    added = 0
    for name in names:
      try:
        validate_member_names([name], session.config.max_name_length)
      except ValueError as e:
        click.secho(f"Skipping {name!r}: {e}", fg="yellow")
        continue
      if session.roster.add(name):
        added += 1
        click.secho(f"Added {name.strip()}", fg="blue")
      else:
        click.secho(f"Skipping {name.strip()!r}: already on the roster", fg="yellow")
    click.secho(f"Added {added} of {len(names)} members; total members: {len(session.roster)}", fg="green")

@cli.command()
@click.argument("name")
@click.pass_context
def remove(ctx: click.Context, name: str):
  """Remove a member from the roster."""
  with sql.connect(ctx.obj["config"].storage_path) as conn:
    session = open_session(ctx, conn)
    if session.roster.remove(name):
      click.secho(f"Removed {name.strip()}", fg="green")
    else:
      click.secho(f"No member named {name.strip()!r}", fg="yellow")

@cli.command()
@click.argument("index", type=int)
@click.argument("new_name")
@click.pass_context
def rename(ctx: click.Context, index: int, new_name: str):
  """Rename the member at INDEX (as shown by `list`)."""
  with sql.connect(ctx.obj["config"].storage_path) as conn:
    session = open_session(ctx, conn)
    roster = session.roster
    if not roster.start_edit(index - 1):
      click.secho(f"Error: No member at index {index}", fg="red")
      sys.exit(1)

    old_name = roster.names[index - 1]
    roster.update_draft(new_name)
    if roster.save_edit():
      click.secho(f"Renamed {old_name} -> {roster.names[index - 1]}", fg="green")
    else:
      click.secho(f"Rename of {old_name} to {new_name.strip()!r} cancelled", fg="yellow")

@cli.command(name="list")
@click.option("--search", "query", default="", help="Only show members containing this text")
@click.pass_context
def list_members(ctx: click.Context, query: str):
  """List the members of the roster."""
  with sql.connect(ctx.obj["config"].storage_path) as conn:
    session = open_session(ctx, conn)
    matches = list(session.roster.search_indexed(query))
    for index, name in matches:
      click.echo(f"{index + 1:>3}. {name}")
    if query:
      click.secho(f"Matching members: {len(matches)}", fg="blue")
    click.secho(f"Total members: {len(session.roster)}", fg="green")

@cli.command()
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear(ctx: click.Context, yes: bool):
  """Remove all members from the roster."""
  if not yes and not click.confirm("Are you sure? This will remove all members and cannot be undone.", default=False):
    click.secho("Clear cancelled", fg="yellow")
    return

  with sql.connect(ctx.obj["config"].storage_path) as conn:
    session = open_session(ctx, conn)
    session.roster.clear()
    click.secho("Cleared all members", fg="green")

@cli.command()
@click.option("--teams", "team_count", type=int, default=None, help="Number of teams")
@click.option("--seed", type=int, default=None, help="Seed for a reproducible draw")
@click.pass_context
def randomize(ctx: click.Context, team_count: Optional[int], seed: Optional[int]):
  """Randomly split the roster into balanced teams."""
  config: Config = ctx.obj["config"]
  if team_count is None:
    team_count = config.default_team_count
  try:
    config.validate_team_count(team_count)
  except ValueError as e:
    raise click.BadParameter(str(e), param_hint="--teams")

  rng = random.Random(seed) if seed is not None else None
  with sql.connect(config.storage_path) as conn:
    session = open_session(ctx, conn, rng=rng)
    if not len(session.roster):
      click.secho("Roster is empty; add members first", fg="yellow")
      return

    assignment = session.randomize(team_count)
    click.echo(assignment.to_frame().to_string())
    summary = assignment.summary()
    click.secho(f"Team sizes: {summary['team_sizes']}", fg="blue")
    click.secho(f"Assigned {summary['total_people']} members to {assignment.team_count} teams", fg="green")

if __name__ == "__main__":
  cli()
