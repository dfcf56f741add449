"""Single source of truth for the shadnex version string."""

__version__ = "0.3.0"
