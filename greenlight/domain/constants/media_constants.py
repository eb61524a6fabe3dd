"""
Shared constants for person photos.

Used by the filesystem photo provider; the VizHash decoder accepts at least
these formats.
"""

# Lookup order when several files exist for one person
PHOTO_EXTENSIONS = (".jpg", ".jpeg", ".png")
