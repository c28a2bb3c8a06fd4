"""Entity models for the ride sharing demonstration."""
from rideshare.models.ride import (
    Ride, RideError, RideType, StandardRide, PremiumRide, SharedRide,
)
from rideshare.models.driver import Driver
from rideshare.models.rider import Rider


__all__ = [
    'Ride',
    'RideError',
    'RideType',
    'StandardRide',
    'PremiumRide',
    'SharedRide',
    'Driver',
    'Rider',
]
