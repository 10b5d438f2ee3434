"""Testing – fakes, helpers and property-based strategies for driver tests."""
