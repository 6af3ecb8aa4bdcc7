"""Credit scoring and compliance rule evaluation core."""

__version__ = "0.1.0"
