"""Hook specifications."""
