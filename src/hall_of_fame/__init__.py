"""Hall of Fame - persons and their skills over a REST API."""

__version__ = "0.1.0"
