"""Use cases — what the CLI does, as plain functions returning results."""
