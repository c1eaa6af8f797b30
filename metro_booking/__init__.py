"""Metro ticket booking service."""
