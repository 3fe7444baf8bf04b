"""Fornost - command-line client for the Hetzner Cloud API."""

__version__ = "0.1.0"
