"""HTTP surface for the compliance engine."""
