"""Console report pages."""
