"""User query service package."""
