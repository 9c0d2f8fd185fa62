"""Main CLI entry point for unitrain."""

from unitrain.cli import app


def main() -> None:
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    main()
