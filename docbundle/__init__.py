"""Combine a directory of markdown pages into one document and render it to HTML."""
