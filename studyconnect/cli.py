"""
Command Line Interface

FLOW OVERVIEW
- Flask CLI groups registered by create_app():
  • flask schema upgrade [TARGET] / downgrade TARGET / current / pending / history
  • flask seed run [NAME...] / undo [NAME...]
  • flask repair list / run NAME
- Every command runs inside the application context against db.engine.
"""

import click
from flask.cli import AppGroup

from .migrations import runner
from .models import db
from .repairs import CORRECTIONS
from .seeders import SEEDERS, run_seeders, undo_seeders
from .utils.errors import MigrationError

schema_cli = AppGroup('schema', help='Apply and inspect schema migrations.')
seed_cli = AppGroup('seed', help='Insert or remove bootstrap data.')
repair_cli = AppGroup('repair', help='Run one-shot data corrections.')


@schema_cli.command('upgrade')
@click.argument('target', default='head')
def schema_upgrade(target):
    """Apply pending migrations up to TARGET (default: head)."""
    try:
        applied = runner.upgrade(db.engine, target)
    except MigrationError as e:
        raise click.ClickException(str(e))
    if not applied:
        click.echo('Nothing to apply.')
    for revision in applied:
        click.echo(f'Applied {revision}')


@schema_cli.command('downgrade')
@click.argument('target')
def schema_downgrade(target):
    """Revert migrations newest first until the schema is at TARGET ('base' for empty)."""
    try:
        reverted = runner.downgrade(db.engine, target)
    except MigrationError as e:
        raise click.ClickException(str(e))
    for revision in reverted:
        click.echo(f'Reverted {revision}')


@schema_cli.command('current')
def schema_current():
    """Show the revision the database is at."""
    click.echo(runner.current_revision(db.engine) or 'base')


@schema_cli.command('pending')
def schema_pending():
    """List migrations not yet applied."""
    steps = runner.pending_revisions(db.engine)
    if not steps:
        click.echo('Up to date.')
    for step in steps:
        click.echo(step.revision)


@schema_cli.command('history')
def schema_history():
    """List every migration, marking the ones that cannot be reverted."""
    for step in runner.history():
        marker = '' if step.invertible else ' [irreversible]'
        click.echo(f'{step.revision}{marker}  {step.description}')


@seed_cli.command('run')
@click.argument('names', nargs=-1)
def seed_run(names):
    """Run seeders (all of them when no NAME is given)."""
    try:
        ran = run_seeders(list(names))
    except ValueError as e:
        raise click.ClickException(str(e))
    for name in ran:
        click.echo(f'Seeded {name}')


@seed_cli.command('undo')
@click.argument('names', nargs=-1)
def seed_undo(names):
    """Revert seeders in reverse order."""
    try:
        undone = undo_seeders(list(names))
    except ValueError as e:
        raise click.ClickException(str(e))
    for name in undone:
        click.echo(f'Reverted {name}')


@seed_cli.command('list')
def seed_list():
    """List seeders in run order."""
    for seeder in SEEDERS:
        click.echo(seeder.name)


@repair_cli.command('list')
def repair_list():
    """List available corrections."""
    for name, correction in CORRECTIONS.items():
        click.echo(f'{name}  {correction.__doc__}')


@repair_cli.command('run')
@click.argument('name', type=click.Choice(sorted(CORRECTIONS)))
def repair_run(name):
    """Run the correction NAME."""
    report = CORRECTIONS[name]().run(db.engine)
    click.echo(f'{report.name}: examined {report.examined}, corrected {report.corrected}, failed {report.failed}')
    if report.failed:
        raise click.ClickException(f"{report.failed} row(s) could not be corrected: {', '.join(report.failed_ids)}")


def register_cli(app):
    app.cli.add_command(schema_cli)
    app.cli.add_command(seed_cli)
    app.cli.add_command(repair_cli)
