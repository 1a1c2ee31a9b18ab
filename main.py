"""Development entrypoint that runs the projector CLI from a source checkout."""

from __future__ import annotations

from projector.cli import app

if __name__ == "__main__":
    app()
