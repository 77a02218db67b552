"""Main entry point for the riddlebot package."""
from riddlebot.cli import cli


def main():
    """Main entry point function."""
    cli(prog_name="riddlebot")


if __name__ == "__main__":
    main()
