"""Crosscutting: config, logging, exceptions."""
