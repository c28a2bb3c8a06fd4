"""Command Line Interface for the ride sharing demonstration."""

import sys

import click
from tabulate import tabulate

from rideshare.config import configure_logging
from rideshare.demo import build_fixture, run_demonstration
from rideshare.models.ride import RideType
from rideshare.services.fare_service import FareService, FareServiceError
from rideshare.utils import format_money, format_number

# Set context settings to properly display help for all commands
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "max_content_width": 120,
    "show_default": True
}


@click.group(context_settings=CONTEXT_SETTINGS, invoke_without_command=True)
@click.pass_context
def cli(ctx):
    """Ride sharing fare demonstration."""
    configure_logging()
    if ctx.invoked_subcommand is None:
        run_demonstration()


@cli.command(name="demo")
def demo_command():
    """Print the full demonstration report."""
    run_demonstration()


@cli.command(name="fare")
@click.argument("ride_type", type=click.Choice([t.value for t in RideType], case_sensitive=False),
                metavar="TYPE")
@click.option("--distance", "-d", type=float, required=True, help="Trip length in miles")
@click.option("--luxury/--no-luxury", default=True, help="Book a luxury vehicle (Premium only)")
@click.option("--passengers", "-p", type=int, default=1, help="Number of passengers (Shared only)")
def fare_command(ride_type, distance, luxury, passengers):
    """
    Quote the fare of a ride.

    TYPE: Standard, Premium or Shared.
    """
    try:
        fare = FareService.quote(ride_type, distance, luxury=luxury, passengers=passengers)
    except FareServiceError as e:
        click.echo(f"Error: {str(e)}", err=True)
        sys.exit(1)

    name = FareService.parse_ride_type(ride_type).value
    click.echo(f"{name} fare: {format_money(fare)}")


@cli.command(name="summary")
def summary_command():
    """Show the demonstration rides as a table."""
    fixture = build_fixture(echo=lambda line: None)

    table_data = [
        [
            ride.ride_id,
            ride.ride_type(),
            ride.pickup_location,
            ride.dropoff_location,
            format_number(ride.distance),
            format_money(ride.fare()),
        ]
        for ride in fixture.registry
    ]

    click.echo(tabulate(
        table_data,
        headers=["Ride ID", "Type", "Pickup", "Dropoff", "Distance", "Fare"],
        tablefmt="pretty",
        disable_numparse=True
    ))
    click.echo(f"\nTotal System Revenue: {format_money(fixture.registry.total_revenue())}")


def main():
    """Entry point for the application."""
    cli()


if __name__ == '__main__':
    main()
