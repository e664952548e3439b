"""Prune a directory of backup files down to a time-stratified subset."""

__version__ = "1.0.0"
