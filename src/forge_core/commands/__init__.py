"""Built-in ``forge-core`` sub-commands."""
