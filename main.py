"""Main entry point for progressive-quiz CLI."""

from progressive_quiz.cli.app import app


def main():
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    main()
