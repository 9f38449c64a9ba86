"""Allow running the CLI with ``python -m aws_inventory``."""

from .cli.main import cli_main

if __name__ == "__main__":
    cli_main()
