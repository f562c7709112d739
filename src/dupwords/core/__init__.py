"""Runtime plumbing shared by the scanner and the CLI."""
