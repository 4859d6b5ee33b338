"""Built-in plugins shipped with appstate."""
