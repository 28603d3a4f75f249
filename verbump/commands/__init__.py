"""Sub-commands of the verbump CLI, one module per command."""
