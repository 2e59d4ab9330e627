"""Transport-free services shared by adapters and the CLI."""
