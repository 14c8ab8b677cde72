"""Console entry points run outside the web process."""
