"""macinv - Export installed macOS apps and Homebrew inventory."""

__version__ = "0.1.0"
