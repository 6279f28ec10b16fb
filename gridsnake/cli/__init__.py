"""
Command line entry points for gridsnake.
"""
