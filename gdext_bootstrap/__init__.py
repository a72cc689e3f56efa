"""Scaffold a Godot GDExtension (C++) skeleton inside an existing Godot project."""

__version__ = "0.1.0"
