"""Command line entry point: ``recordkeeper <demo>``."""

import logging

import click

from recordkeeper.application import (
    run_finance_demo,
    run_grading_demo,
    run_healthcare_demo,
    run_inventory_demo,
    run_warehouse_demo,
)
from recordkeeper.config import settings
from recordkeeper.logging_config import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Run one of the record keeping demos."""
    configure_logging("DEBUG" if verbose else settings.log_level)


@cli.command()
def inventory():
    """Save and reload an inventory snapshot."""
    run_inventory_demo(settings.inventory_file)


@cli.command()
def warehouse():
    """Exercise the warehouse stock repositories."""
    run_warehouse_demo()


@cli.command()
def healthcare():
    """List patients and their prescriptions."""
    run_healthcare_demo()


@cli.command()
def grading():
    """Parse student results and write the grade report."""
    run_grading_demo(settings.students_file, settings.grade_report_file)


@cli.command()
def finance():
    """Process transactions against a savings account."""
    run_finance_demo()


@cli.command(name="all")
@click.pass_context
def run_all(ctx):
    """Run every demo in turn."""
    for command in (inventory, warehouse, healthcare, grading, finance):
        click.echo(f"\n##### {command.name} #####\n")
        ctx.invoke(command)
    logger.debug("All demos finished")


def main():
    cli()


if __name__ == "__main__":
    main()
