"""
Command line tools for jump destination analysis.
"""
