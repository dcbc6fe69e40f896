"""
Bookmark Pinner: pin the page in your browser to Pinboard.
"""

__version__ = "1.0.0"
