"""shadnex — interactive Next.js + Shadcn UI project scaffolder.

Collects project preferences, then drives ``create-next-app`` and the
``shadcn`` initializer through the package manager of your choice.
"""

from shadnex.version import __version__

__all__: list[str] = ["__version__"]
