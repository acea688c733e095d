"""Graph capability, set algebra and vertex orderings used by the search."""
