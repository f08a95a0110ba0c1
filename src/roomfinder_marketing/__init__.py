"""Marketing backend for room rental and sale listings."""
