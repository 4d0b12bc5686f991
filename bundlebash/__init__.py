"""Bix's Bundle Bash: a small arcade game built on a tiny entity-component-system."""

__version__ = "0.1.0"
__all__ = ["__version__"]