"""Engine Yard CLI commands."""
