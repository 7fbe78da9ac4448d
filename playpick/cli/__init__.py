"""
Command-line interface for playpick.
"""
