"""Captain's Log - boat maintenance and compliance alerting service."""

__version__ = "0.1.0"
