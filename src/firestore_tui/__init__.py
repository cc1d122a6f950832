"""Two-pane terminal browser for Firestore."""
