"""Allow running songvocab as a module: python -m songvocab."""

from songvocab.cli import app

if __name__ == "__main__":
    app()
