"""Document submission and lookup workflows."""
