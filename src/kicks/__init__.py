"""Provision kicks application workspaces from a template."""

__version__ = "0.4.0"
