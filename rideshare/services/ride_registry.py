"""Registry owning the rides created during a run."""

import logging
from typing import Dict, Iterator

from rideshare.models.ride import Ride

logger = logging.getLogger(__name__)


class RideRegistryError(Exception):
    """Custom exception for ride registry errors."""
    pass


class RideRegistry:
    """
    Holds every ride of a run, keyed by ride id.

    Drivers and riders only keep references to rides; the registry is the
    place the rides are created into and looked up from. Iteration follows
    registration order.
    """

    def __init__(self):
        self._rides: Dict[int, Ride] = {}

    def register(self, ride: Ride) -> Ride:
        """
        Add a ride to the registry.

        Args:
            ride: The ride to register

        Returns:
            Ride: The registered ride

        Raises:
            RideRegistryError: If a ride with the same id is already registered
        """
        if ride.ride_id in self._rides:
            raise RideRegistryError(f"Ride #{ride.ride_id} is already registered.")

        self._rides[ride.ride_id] = ride
        logger.debug("Registered %s ride #%s", ride.ride_type(), ride.ride_id)
        return ride

    def get(self, ride_id: int) -> Ride:
        """
        Look up a ride by id.

        Raises:
            RideRegistryError: If no ride has this id
        """
        try:
            return self._rides[ride_id]
        except KeyError:
            raise RideRegistryError(f"Ride #{ride_id} not found.")

    def total_revenue(self) -> float:
        """Sum of the fares of every registered ride."""
        return sum(ride.fare() for ride in self._rides.values())

    def __iter__(self) -> Iterator[Ride]:
        return iter(self._rides.values())

    def __len__(self) -> int:
        return len(self._rides)

    def __contains__(self, ride_id) -> bool:
        return ride_id in self._rides
