"""Feature slices for tree-pro."""
