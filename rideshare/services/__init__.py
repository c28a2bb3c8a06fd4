"""Services wrapping the ride models."""
