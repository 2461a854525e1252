"""Build, inspect and manage Traefik dynamic configuration files."""

__version__ = "0.2.0"