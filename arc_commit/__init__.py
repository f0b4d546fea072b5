"""AI-assisted interactive git commit tool."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("arc-commit")
except PackageNotFoundError:
    # Fallback for development mode
    __version__ = "0.0.0-dev"
