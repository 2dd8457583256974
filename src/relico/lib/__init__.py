"""Core relico library: color model, escape rendering and formatters."""
