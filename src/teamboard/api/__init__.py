"""HTTP API for the Teamboard application."""
