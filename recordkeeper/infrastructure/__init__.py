"""Infrastructure package: collection implementations and file I/O."""
