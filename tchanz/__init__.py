"""Grid-based ant colony simulation with configuration files and a command line."""

__version__ = "0.1.0"