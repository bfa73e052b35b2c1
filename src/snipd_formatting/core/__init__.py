"""Core library: domain models, template rendering, configuration."""
