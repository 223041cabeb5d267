"""Static reference data: CSV tables and formula constants."""
