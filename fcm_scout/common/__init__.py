"""
Common helpers shared by scrapers, API and CLI.

Note: do not import submodules here to keep package import lightweight.
"""

__all__: list[str] = []
