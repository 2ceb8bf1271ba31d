"""Engine Yard Cloud command line client."""

from engineyard.constants import VERSION

__version__ = VERSION
