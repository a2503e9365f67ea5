"""
Command implementations for the recsort CLI.
"""
