"""Properties fixtures loaded through importlib.resources."""
