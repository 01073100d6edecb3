"""One-shot reference data seeders."""
