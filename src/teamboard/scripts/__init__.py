"""Operational scripts for the Teamboard application."""
