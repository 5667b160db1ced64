"""
Command-line interface for Veritree.
"""
