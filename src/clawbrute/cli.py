"""ClawBrute CLI entry point."""

from clawbrute.cli_commands import app


def main() -> None:
    app()


if __name__ == "__main__":
    main()
