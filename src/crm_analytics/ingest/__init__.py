"""Dataset sources for the analytics: JSON files, the built-in sample, or nothing."""
