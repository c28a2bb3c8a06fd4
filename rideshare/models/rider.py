"""Rider entity for the ride sharing demonstration."""

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Tuple

import click

from rideshare.models.ride import Ride
from rideshare.utils import format_money

logger = logging.getLogger(__name__)


@dataclass
class Rider:
    """
    Represents a rider requesting rides.

    Attributes:
        rider_id: Unique identifier for the rider
        name: Rider's display name
        notify: Callable receiving the request announcements
    """
    rider_id: int
    name: str
    notify: Callable[[str], None] = field(default=click.echo, repr=False, compare=False)
    _requested_rides: List[Ride] = field(default_factory=list, init=False, repr=False)

    @property
    def rides(self) -> Tuple[Ride, ...]:
        """Get the rides requested by this rider, in request order."""
        return tuple(self._requested_rides)

    @property
    def ride_count(self) -> int:
        return len(self._requested_rides)

    def request_ride(self, ride: Ride) -> None:
        """Record a ride request and announce it."""
        self._requested_rides.append(ride)
        logger.debug("Rider %s requested ride #%s", self.rider_id, ride.ride_id)
        self.notify(
            f"{self.name} requested a {ride.ride_type()} ride "
            f"from {ride.pickup_location} to {ride.dropoff_location}")

    def total_spent(self) -> float:
        return sum(ride.fare() for ride in self._requested_rides)

    def view_rides(self) -> str:
        """
        Render the rider's ride history block.

        Returns:
            str: Multi-line block with the rider's details, rides and spend
        """
        lines = [
            "========== RIDER INFORMATION ==========",
            f"Rider ID: {self.rider_id}",
            f"Name: {self.name}",
            f"Total Rides Requested: {self.ride_count}",
        ]

        if self._requested_rides:
            lines.append("")
            lines.append("Ride History:")
            lines.extend(f"  - {ride.summary_line()}" for ride in self._requested_rides)
            lines.append(f"Total Amount Spent: {format_money(self.total_spent())}")

        lines.append("=" * 39)
        return "\n".join(lines)
