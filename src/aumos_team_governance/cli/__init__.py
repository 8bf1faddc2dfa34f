"""Command-line interface for aumos-team-governance."""
