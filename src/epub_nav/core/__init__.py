"""Core EPUB reading logic."""
