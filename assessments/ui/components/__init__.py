"""Console UI components."""
