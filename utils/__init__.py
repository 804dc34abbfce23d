"""Text utilities for vowel word extraction."""
