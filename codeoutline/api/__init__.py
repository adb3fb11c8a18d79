"""HTTP API for outlining files."""
