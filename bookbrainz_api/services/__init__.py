"""Services Layer — IO-bound operations over the store (entity resolution)."""
