"""Ride entities for the ride sharing demonstration."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List

from rideshare.utils import format_money, format_number


class RideType(Enum):
    """Pricing variants a ride can be booked as."""
    STANDARD = "Standard"
    PREMIUM = "Premium"
    SHARED = "Shared"


class RideError(ValueError):
    """Custom exception for invalid ride attributes."""
    pass


@dataclass(frozen=True)
class Ride(ABC):
    """
    Base class for every ride in the system.

    Attributes:
        ride_id: Identifier of the ride, unique within a run
        pickup_location: Where the rider is collected
        dropoff_location: Where the rider is dropped off
        distance: Length of the trip in miles
    """
    ride_id: int
    pickup_location: str
    dropoff_location: str
    distance: float

    RIDE_TYPE: ClassVar[RideType]
    BASE_FARE_PER_MILE: ClassVar[float]

    def __post_init__(self):
        """Validate the common ride attributes."""
        if not math.isfinite(self.distance):
            raise RideError(
                f"Ride #{self.ride_id}: distance must be a finite number ({self.distance}).")
        if self.distance < 0:
            raise RideError(
                f"Ride #{self.ride_id}: distance cannot be negative ({self.distance}).")
        if not math.isfinite(self.fare()):
            raise RideError(
                f"Ride #{self.ride_id}: distance {self.distance} is too large to price.")

    @property
    def base_fare_per_mile(self) -> float:
        """Get the per-mile rate of this ride's variant."""
        return self.BASE_FARE_PER_MILE

    @property
    def base_fare(self) -> float:
        """Get the distance-based part of the fare."""
        return self.distance * self.BASE_FARE_PER_MILE

    @abstractmethod
    def fare(self) -> float:
        """Calculate the fare for this ride."""

    def ride_type(self) -> str:
        """Get the display name of the ride's variant."""
        return self.RIDE_TYPE.value

    def _extra_details(self) -> List[str]:
        """Variant specific lines appended to the details block."""
        return []

    def ride_details(self) -> str:
        """
        Render a human readable summary of the ride.

        Returns:
            str: Multi-line details block, starting with the variant header
        """
        lines = [
            f"--- {self.ride_type().upper()} RIDE ---",
            f"Ride ID: {self.ride_id}",
            f"Pickup: {self.pickup_location}",
            f"Dropoff: {self.dropoff_location}",
            f"Distance: {format_number(self.distance)} miles",
            f"Fare: {format_money(self.fare())}",
        ]
        lines.extend(self._extra_details())
        return "\n".join(lines)

    def summary_line(self) -> str:
        """Get the one-line ``Ride #<id> (<type>): $<fare>`` summary."""
        return f"Ride #{self.ride_id} ({self.ride_type()}): {format_money(self.fare())}"


@dataclass(frozen=True)
class StandardRide(Ride):
    """A regular ride charged per mile plus a flat booking fee."""

    RIDE_TYPE: ClassVar[RideType] = RideType.STANDARD
    BASE_FARE_PER_MILE: ClassVar[float] = 2.5
    BOOKING_FEE: ClassVar[float] = 1.5

    def fare(self) -> float:
        return self.base_fare + self.BOOKING_FEE


@dataclass(frozen=True)
class PremiumRide(Ride):
    """
    A premium ride with a fixed surcharge.

    Attributes:
        luxury_vehicle: Whether a luxury vehicle was booked, adding a bonus
    """
    luxury_vehicle: bool = True

    RIDE_TYPE: ClassVar[RideType] = RideType.PREMIUM
    BASE_FARE_PER_MILE: ClassVar[float] = 4.0
    PREMIUM_SURCHARGE: ClassVar[float] = 5.0
    LUXURY_BONUS: ClassVar[float] = 10.0

    def fare(self) -> float:
        luxury_bonus = self.LUXURY_BONUS if self.luxury_vehicle else 0.0
        return self.base_fare + self.PREMIUM_SURCHARGE + luxury_bonus

    def _extra_details(self) -> List[str]:
        return [f"Luxury Vehicle: {'Yes' if self.luxury_vehicle else 'No'}"]


@dataclass(frozen=True)
class SharedRide(Ride):
    """
    A ride shared with other passengers, discounted off the base fare.

    The passenger count is reported but does not change the fare.

    Attributes:
        number_of_passengers: How many passengers share the vehicle
    """
    number_of_passengers: int = 1

    RIDE_TYPE: ClassVar[RideType] = RideType.SHARED
    BASE_FARE_PER_MILE: ClassVar[float] = 1.5
    DISCOUNT_RATE: ClassVar[float] = 0.70

    def __post_init__(self):
        super().__post_init__()
        if self.number_of_passengers < 1:
            raise RideError(
                f"Ride #{self.ride_id}: a shared ride needs at least one passenger.")

    def fare(self) -> float:
        return self.base_fare * self.DISCOUNT_RATE

    def _extra_details(self) -> List[str]:
        discount = round((1 - self.DISCOUNT_RATE) * 100)
        return [
            f"Number of Passengers: {self.number_of_passengers}",
            f"Discount Applied: {discount}%",
        ]
