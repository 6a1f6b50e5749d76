"""Database access for the sql progress backend."""
