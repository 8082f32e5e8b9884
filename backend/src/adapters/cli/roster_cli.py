"""
Command-line interface for the Takedown roster manager.

This module provides the main entry point for the takedown CLI.
"""

import sys
from pathlib import Path
from typing import List, Optional

import click

from config.settings import Settings
from core.exceptions import ConfigurationError, TakedownException
from core.utils import LoggerFactory
from domain.models.base import MemberKind
from domain.services.roster_service import RosterService

logger = LoggerFactory.get_logger(__name__)

KIND_CHOICES = {kind.value.lower(): kind for kind in MemberKind}


def _format_ratio(value: Optional[float], suffix: str = "") -> str:
    if value is None:
        return "n/a"
    return f"{value:.1f}{suffix}"


def _format_table(headers: List[str], rows: List[List[str]]) -> str:
    widths = [len(header) for header in headers]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    lines = ["  ".join(header.ljust(width) for header, width in zip(headers, widths))]
    lines.append("  ".join("-" * width for width in widths))
    for row in rows:
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)))
    return "\n".join(lines)


def _load_or_exit(service: RosterService, path: str):
    result = service.load_team(path)
    if not result.success:
        for error in result.errors:
            click.echo(f"Error: {error.message}", err=True)
        sys.exit(1)
    if result.has_errors:
        click.echo(f"Warning: {result.error_count} line(s) could not be loaded", err=True)
    return result


@click.group()
@click.option('--weight-categories', 'weight_categories_path', type=click.Path(dir_okay=False),
              help='Path to the weight category JSON resource')
@click.option('--log-level', default=None, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
@click.pass_context
def main(ctx, weight_categories_path, log_level):
    """Takedown - Wrestling Team Roster Manager."""
    app_settings = Settings()
    if weight_categories_path:
        app_settings.weight_categories_path = weight_categories_path
    if log_level:
        app_settings.log_level = log_level

    LoggerFactory.setup_logging(
        level=app_settings.log_level,
        format_string=app_settings.log_format,
        log_file=app_settings.log_file,
        force=True
    )

    try:
        ctx.obj = RosterService.from_settings(app_settings)
    except ConfigurationError as e:
        logger.critical(f"Cannot start: {e}")
        click.echo(f"Fatal: {e.message}", err=True)
        sys.exit(2)


@main.command()
@click.argument('name')
@click.option('--directory', type=click.Path(file_okay=False), help='Directory for the roster file')
@click.option('--force', is_flag=True, help='Overwrite an existing roster file')
@click.pass_obj
def new(service: RosterService, name, directory, force):
    """Create a new, empty team roster file."""
    try:
        team = service.create_team(name, directory)
        if not force and team.filepath and Path(team.filepath).exists():
            click.echo(f"Error: {team.filepath} already exists (use --force to overwrite)", err=True)
            sys.exit(1)
        path = service.save_team(team)
    except TakedownException as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    click.echo(f"Created team '{team.name}' at {path}")


@main.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--kind', type=click.Choice(sorted(KIND_CHOICES)), help='Only show one member kind')
@click.pass_obj
def show(service: RosterService, path, kind):
    """Print the members of a roster file."""
    team = _load_or_exit(service, path).team
    kinds = [KIND_CHOICES[kind]] if kind else list(MemberKind)

    click.echo(f"Team: {team.name}")
    for member_kind in kinds:
        headers, rows = service.roster_table(team, member_kind)
        click.echo("")
        click.echo(f"{member_kind.plural} ({len(rows)})")
        click.echo(_format_table(headers, rows))


@main.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.pass_obj
def stats(service: RosterService, path):
    """Print team statistics and the weight category breakdown."""
    team = _load_or_exit(service, path).team
    statistics = service.team_statistics(team)

    click.echo(f"Team: {statistics.team_name}")
    click.echo(f"Members:              {statistics.member_count}")
    click.echo(f"Wrestlers:            {statistics.wrestler_count} "
               f"({statistics.male_wrestler_count} male, {statistics.female_wrestler_count} female)")
    click.echo(f"Coaches:              {statistics.coach_count} "
               f"({statistics.male_coach_count} male, {statistics.female_coach_count} female; "
               f"{statistics.hands_on_coach_count} hands-on, {statistics.support_coach_count} support)")
    click.echo(f"Matches:              {statistics.total_matches}")
    click.echo(f"Wins / Losses:        {statistics.total_wins} / {statistics.total_losses}")
    click.echo(f"Win percentage:       {_format_ratio(statistics.win_percentage, '%')}")
    click.echo(f"Loss percentage:      {_format_ratio(statistics.loss_percentage, '%')}")
    click.echo(f"Total points:         {statistics.total_points}")
    click.echo(f"Pins:                 {statistics.total_pin_count}")
    click.echo(f"Points per match:     {_format_ratio(statistics.average_points_per_match)}")

    click.echo("")
    click.echo(_format_table(
        ["Weight Category", "All", "Male", "Female"],
        [
            [f"{entry.weight_category:g}", str(entry.all_count), str(entry.male_count), str(entry.female_count)]
            for entry in statistics.weight_category_breakdown
        ]
    ))


@main.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.pass_obj
def validate(service: RosterService, path):
    """Check a roster file and report every line that fails to load."""
    result = service.load_team(path)
    for error in result.errors:
        line_number = getattr(error, 'line_number', None)
        location = f"line {line_number}: " if line_number else ""
        click.echo(f"{location}{error.message}")

    if not result.success:
        sys.exit(1)

    click.echo(result.summary())
    if result.has_errors:
        sys.exit(1)


@main.command()
@click.pass_obj
def version(service: RosterService):
    """Display the current version."""
    click.echo(f"{service.settings.app_name} v{service.settings.app_version}")


if __name__ == '__main__':
    main()
