"""Core configuration for the Teamboard application."""
