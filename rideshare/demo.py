"""Demonstration program wiring riders, drivers and rides together."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List

import click

from rideshare.config import BANNER_WIDTH, REPORT_TITLE
from rideshare.models.driver import Driver
from rideshare.models.ride import StandardRide, PremiumRide, SharedRide
from rideshare.models.rider import Rider
from rideshare.services.fare_service import FareService
from rideshare.services.ride_registry import RideRegistry

logger = logging.getLogger(__name__)


@dataclass
class DemoFixture:
    """The rides and parties of one demonstration run."""
    registry: RideRegistry
    drivers: List[Driver] = field(default_factory=list)
    riders: List[Rider] = field(default_factory=list)


# Section title lines, padded as they appear in the report
OPENING_TITLE = f"   {REPORT_TITLE}   "
RIDES_TITLE = "     ALL RIDES DETAILS (POLYMORPHISM)   "
FARES_TITLE = "     FARE CALCULATION (POLYMORPHISM)    "
CLOSING_TITLE = "   SYSTEM DEMONSTRATION COMPLETED       "


def banner(title_line: str) -> List[str]:
    """Get the three banner lines framing an already padded title line."""
    rule = "=" * BANNER_WIDTH
    return [rule, title_line, rule]


def build_fixture(echo: Callable[[str], None] = click.echo) -> DemoFixture:
    """
    Create the demonstration rides and parties, then request and assign rides.

    Args:
        echo: Callable receiving each output line

    Returns:
        DemoFixture: The populated fixture
    """
    def announce(line: str) -> None:
        echo("")
        echo(line)

    alice = Rider(1001, "Alice Johnson", notify=announce)
    bob = Rider(1002, "Bob Smith", notify=announce)

    john = Driver(2001, "John Doe", 4.8, notify=announce)
    jane = Driver(2002, "Jane Williams", 4.9, notify=announce)

    registry = RideRegistry()
    for ride in (
        StandardRide(3001, "Downtown", "Airport", 15.5),
        PremiumRide(3002, "Hotel", "Conference Center", 8.3, luxury_vehicle=True),
        SharedRide(3003, "University", "Mall", 6.7, number_of_passengers=3),
        StandardRide(3004, "Home", "Office", 12.0),
        PremiumRide(3005, "Restaurant", "Theater", 4.5, luxury_vehicle=False),
    ):
        registry.register(ride)

    alice.request_ride(registry.get(3001))
    alice.request_ride(registry.get(3002))
    bob.request_ride(registry.get(3003))
    bob.request_ride(registry.get(3004))
    alice.request_ride(registry.get(3005))

    john.add_ride(registry.get(3001))
    john.add_ride(registry.get(3003))
    jane.add_ride(registry.get(3002))
    jane.add_ride(registry.get(3004))
    jane.add_ride(registry.get(3005))

    return DemoFixture(registry=registry, drivers=[john, jane], riders=[alice, bob])


def run_demonstration(echo: Callable[[str], None] = click.echo) -> DemoFixture:
    """
    Run the full demonstration, writing the report line by line.

    Args:
        echo: Callable receiving each output line

    Returns:
        DemoFixture: The fixture the report was produced from
    """
    logger.info("Starting ride sharing demonstration")

    for line in banner(OPENING_TITLE):
        echo(line)

    fixture = build_fixture(echo)

    echo("")
    echo("")
    for line in banner(RIDES_TITLE):
        echo(line)
    for ride in fixture.registry:
        echo("")
        echo(ride.ride_details())
        echo("")

    echo("")
    for line in banner(FARES_TITLE):
        echo(line)
    for line in FareService.fare_lines(fixture.registry):
        echo(line)

    for driver in fixture.drivers:
        echo("")
        echo(driver.get_driver_info())
    for rider in fixture.riders:
        echo("")
        echo(rider.view_rides())

    echo("")
    for line in banner(CLOSING_TITLE):
        echo(line)

    logger.info("Demonstration finished with %d ride(s)", len(fixture.registry))
    return fixture
