"""Driver entity for the ride sharing demonstration."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

import click

from rideshare.models.ride import Ride
from rideshare.utils import format_money, format_number

logger = logging.getLogger(__name__)


@dataclass
class Driver:
    """
    Represents a driver serving rides.

    Attributes:
        driver_id: Unique identifier for the driver
        name: Driver's display name
        rating: Driver's average rating (0-5)
        notify: Callable receiving the assignment announcements
    """
    driver_id: int
    name: str
    rating: float
    notify: Callable[[str], None] = field(default=click.echo, repr=False, compare=False)
    _assigned_rides: List[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> Tuple[Ride, ...]:
        """Get the rides assigned to this driver, in assignment order."""
        return tuple(self._assigned_rides)

    @property
    def ride_count(self) -> int:
        """Get the number of rides assigned to this driver."""
        return len(self._assigned_rides)

    def add_ride(self, ride: Ride) -> None:
        """
        Assign a ride to this driver.

        The ride is not checked for uniqueness; assigning the same ride twice
        counts it twice.

        Args:
            ride: The ride to assign
        """
        self._assigned_rides.append(ride)
        logger.debug("Driver %s now holds %d ride(s)", self.driver_id, self.ride_count)
        self.notify(f"Ride #{ride.ride_id} assigned to {self.name}")

    def total_earnings(self) -> float:
        """Sum of the fares of every assigned ride."""
        return sum(ride.fare() for ride in self._assigned_rides)

    def get_driver_info(self) -> str:
        """
        Render the driver's information block.

        Returns:
            str: Multi-line block with the driver's details, rides and earnings
        """
        lines = [
            "========== DRIVER INFORMATION ==========",
            f"Driver ID: {self.driver_id}",
            f"Name: {self.name}",
            f"Rating: {format_number(self.rating)} stars",
            f"Total Rides Completed: {self.ride_count}",
        ]

        if self._assigned_rides:
            lines.append("")
            lines.append("Completed Rides:")
            lines.extend(f"  - {ride.summary_line()}" for ride in self._assigned_rides)
            lines.append(f"Total Earnings: {format_money(self.total_earnings())}")

        lines.append("=" * 40)
        return "\n".join(lines)
