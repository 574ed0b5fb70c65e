"""Kinship - artwork similarity engine for a social gallery.

Links related artworks by feature-vector cosine similarity, falling back
to medium and year metadata, and ranks gallery works against uploaded files.
"""

__version__ = "0.1.0"
__author__ = "Kinship Team"
