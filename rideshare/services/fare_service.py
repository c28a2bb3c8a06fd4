"""Fare service for the ride sharing demonstration."""

import logging
from typing import Dict, Iterable, List, Type

from rideshare.models.ride import (
    Ride, RideError, RideType, StandardRide, PremiumRide, SharedRide,
)
from rideshare.utils import format_money

logger = logging.getLogger(__name__)

RIDE_CLASSES: Dict[RideType, Type[Ride]] = {
    RideType.STANDARD: StandardRide,
    RideType.PREMIUM: PremiumRide,
    RideType.SHARED: SharedRide,
}

# Id given to rides built only to quote a fare
QUOTE_RIDE_ID = 0


class FareServiceError(Exception):
    """Custom exception for fare service errors."""
    pass


class FareService:
    """Service for fare quotes and fare summaries."""

    @staticmethod
    def parse_ride_type(name: str) -> RideType:
        """
        Resolve a ride type from its name, ignoring case.

        Args:
            name: Ride type name, e.g. "standard" or "Premium"

        Returns:
            RideType: The matching ride type

        Raises:
            FareServiceError: If the name matches no ride type
        """
        for ride_type in RideType:
            if ride_type.value.lower() == name.strip().lower():
                return ride_type

        valid = ", ".join(ride_type.value for ride_type in RideType)
        raise FareServiceError(f"Unknown ride type '{name}'. Expected one of: {valid}.")

    @staticmethod
    def quote(ride_type_name: str, distance: float, luxury: bool = True,
              passengers: int = 1) -> float:
        """
        Quote the fare of a ride without recording it anywhere.

        Args:
            ride_type_name: Name of the ride type
            distance: Trip length in miles
            luxury: Whether a luxury vehicle is booked (premium rides only)
            passengers: Number of passengers (shared rides only)

        Returns:
            float: The fare at full precision

        Raises:
            FareServiceError: If the ride type or the ride attributes are invalid
        """
        ride_type = FareService.parse_ride_type(ride_type_name)

        kwargs = {}
        if ride_type is RideType.PREMIUM:
            kwargs["luxury_vehicle"] = luxury
        elif ride_type is RideType.SHARED:
            kwargs["number_of_passengers"] = passengers

        try:
            ride = RIDE_CLASSES[ride_type](QUOTE_RIDE_ID, "", "", distance, **kwargs)
        except RideError as e:
            raise FareServiceError(f"Cannot quote fare: {str(e)}")

        fare = ride.fare()
        logger.debug("Quoted %s fare for %.2f miles: %f", ride_type.value, distance, fare)
        return fare

    @staticmethod
    def fare_lines(rides: Iterable[Ride]) -> List[str]:
        """
        Render the fare calculation pass over a ride collection.

        Returns:
            List[str]: One summary line per ride, a blank line, then the
            total revenue line
        """
        lines = []
        total_revenue = 0.0
        for ride in rides:
            total_revenue += ride.fare()
            lines.append(ride.summary_line())

        lines.append("")
        lines.append(f"Total System Revenue: {format_money(total_revenue)}")
        return lines
