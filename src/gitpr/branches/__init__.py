"""Branch names, branch listings, and pull request extraction."""
