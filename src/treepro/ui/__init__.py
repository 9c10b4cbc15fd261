"""User interfaces for tree-pro."""
