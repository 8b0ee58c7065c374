"""HTTP interface (Flask)."""
