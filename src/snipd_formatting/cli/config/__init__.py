"""Formatting settings commands: ``snipd-formatting config <name>``."""
