"""Reference astronomical formulas."""
