"""
firestore-tui entrypoint.

Executed via:
  python -m firestore_tui <projectId>
"""

from firestore_tui.cli.app import app

if __name__ == "__main__":
    app()
