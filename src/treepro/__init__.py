"""tree-pro: compact directory trees that collapse identical subdirectories."""

__version__ = "0.1.0"
