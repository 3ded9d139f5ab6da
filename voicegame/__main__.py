"""Entry point for `python -m voicegame`."""

from voicegame.cli.commands import app

if __name__ == "__main__":
    app()
