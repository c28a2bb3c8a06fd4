"""Tests for driver ride assignment and earnings."""

import pytest

from rideshare.models.driver import Driver
from rideshare.models.ride import StandardRide, PremiumRide, SharedRide


@pytest.fixture
def announcements():
    """Fixture collecting the lines a party announces."""
    return []


@pytest.fixture
def driver(announcements):
    """Fixture for a driver whose announcements are collected."""
    return Driver(2001, "John Doe", 4.8, notify=announcements.append)


@pytest.fixture
def rides():
    """Fixture for the rides served by the first demonstration driver."""
    return [
        StandardRide(3001, "Downtown", "Airport", 15.5),
        SharedRide(3003, "University", "Mall", 6.7, number_of_passengers=3),
    ]


class TestDriverAssignment:
    """Test class for assigning rides to a driver."""

    def test_add_ride_announces_assignment(self, driver, announcements, rides):
        """Test each assignment emits a single line naming ride and driver."""
        driver.add_ride(rides[0])

        assert announcements == ["Ride #3001 assigned to John Doe"]

    def test_add_ride_is_append_only(self, driver, rides):
        """Test the ride list grows by one per assignment, in order."""
        for ride in rides:
            driver.add_ride(ride)

        assert driver.ride_count == 2
        assert driver.rides == tuple(rides)

    def test_same_ride_counts_twice(self, driver, rides):
        """Test duplicate assignments are kept and double counted."""
        driver.add_ride(rides[0])
        driver.add_ride(rides[0])

        assert driver.ride_count == 2
        assert driver.total_earnings() == pytest.approx(80.50)

    def test_rides_view_is_read_only(self, driver, rides):
        """Test the rides view cannot be used to change the assignment list."""
        driver.add_ride(rides[0])
        view = driver.rides

        with pytest.raises(AttributeError):
            view.append(rides[1])
        assert driver.ride_count == 1


class TestDriverInfo:
    """Test class for the driver information block."""

    def test_total_earnings(self, driver, rides):
        """Test earnings are the sum of the assigned fares."""
        for ride in rides:
            driver.add_ride(ride)

        assert driver.total_earnings() == pytest.approx(47.285)

    def test_info_block(self, driver, rides):
        """Test the rendered block lists rides and rounds earnings half up."""
        for ride in rides:
            driver.add_ride(ride)

        assert driver.get_driver_info().split("\n") == [
            "========== DRIVER INFORMATION ==========",
            "Driver ID: 2001",
            "Name: John Doe",
            "Rating: 4.80 stars",
            "Total Rides Completed: 2",
            "",
            "Completed Rides:",
            "  - Ride #3001 (Standard): $40.25",
            "  - Ride #3003 (Shared): $7.04",
            "Total Earnings: $47.29",
            "=" * 40,
        ]

    def test_info_without_rides(self, driver):
        """Test a driver with no rides shows no ride section."""
        info = driver.get_driver_info()

        assert "Total Rides Completed: 0" in info
        assert "Completed Rides:" not in info
        assert "Total Earnings" not in info
        assert driver.total_earnings() == 0

    def test_earnings_follow_ride_variants(self, driver):
        """Test earnings use each ride's own pricing rule."""
        driver.add_ride(PremiumRide(3002, "Hotel", "Conference Center", 8.3))
        driver.add_ride(StandardRide(3004, "Home", "Office", 12.0))
        driver.add_ride(PremiumRide(3005, "Restaurant", "Theater", 4.5, luxury_vehicle=False))

        assert driver.total_earnings() == pytest.approx(102.70)
        assert "Total Earnings: $102.70" in driver.get_driver_info()
