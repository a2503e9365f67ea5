"""
recsort CLI - Order-independent comparison of JSON documents

Commands:
- recsort equal - Compare two JSON documents ignoring array order
- recsort canonicalize - Print canonical JSON or its fingerprint
- recsort version - Show version information
"""

__version__ = "0.1.0"
