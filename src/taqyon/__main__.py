"""Allow ``python -m taqyon``."""

from taqyon.cli.main import cli

if __name__ == "__main__":
    cli()
