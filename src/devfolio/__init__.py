"""devfolio: personal portfolio site with an admin area for its content."""

__version__ = "0.1.0"
