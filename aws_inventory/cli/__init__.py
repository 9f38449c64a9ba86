"""Command-line interface for aws-inventory."""
