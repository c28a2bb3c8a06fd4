"""Tests for the ride registry."""

import pytest

from rideshare.models.ride import StandardRide, PremiumRide, SharedRide
from rideshare.services.ride_registry import RideRegistry, RideRegistryError


@pytest.fixture
def registry():
    """Fixture for a registry holding the five demonstration rides."""
    registry = RideRegistry()
    registry.register(StandardRide(3001, "Downtown", "Airport", 15.5))
    registry.register(PremiumRide(3002, "Hotel", "Conference Center", 8.3, luxury_vehicle=True))
    registry.register(SharedRide(3003, "University", "Mall", 6.7, number_of_passengers=3))
    registry.register(StandardRide(3004, "Home", "Office", 12.0))
    registry.register(PremiumRide(3005, "Restaurant", "Theater", 4.5, luxury_vehicle=False))
    return registry


class TestRideRegistry:
    """Test class for ride registration and lookup."""

    def test_iterates_in_registration_order(self, registry):
        """Test iteration follows the order rides were registered in."""
        assert [ride.ride_id for ride in registry] == [3001, 3002, 3003, 3004, 3005]
        assert len(registry) == 5

    def test_get_returns_same_instance(self, registry):
        """Test lookups hand out the registered ride, not a copy."""
        assert registry.get(3003) is registry.get(3003)
        assert registry.get(3003).ride_type() == "Shared"
        assert 3003 in registry

    def test_get_unknown_ride(self, registry):
        """Test looking up a missing ride raises a registry error."""
        with pytest.raises(RideRegistryError) as excinfo:
            registry.get(9999)

        assert "Ride #9999 not found" in str(excinfo.value)

    def test_duplicate_id_rejected(self, registry):
        """Test a second ride with an existing id is refused."""
        with pytest.raises(RideRegistryError):
            registry.register(StandardRide(3001, "Elsewhere", "Nowhere", 1.0))

        assert registry.get(3001).pickup_location == "Downtown"

    def test_total_revenue(self, registry):
        """Test revenue is the full precision sum of every fare."""
        assert registry.total_revenue() == pytest.approx(149.985)

    def test_empty_registry(self):
        """Test an empty registry has no rides and no revenue."""
        registry = RideRegistry()

        assert len(registry) == 0
        assert list(registry) == []
        assert registry.total_revenue() == 0
