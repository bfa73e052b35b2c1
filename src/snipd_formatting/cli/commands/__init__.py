"""Top-level commands: ``snipd-formatting <name>``."""
