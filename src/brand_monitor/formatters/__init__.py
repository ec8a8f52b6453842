"""Output formatters for visibility reports."""
