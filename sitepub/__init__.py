"""sitepub - build, take offline, swap and publish a web application."""

__version__ = "0.1.0"
