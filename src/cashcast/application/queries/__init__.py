"""Application queries."""
