"""Minecraft mod-pack client updater."""

__version__ = "1.0.0"
