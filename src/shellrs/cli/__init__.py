"""
Command Line Interface for shellrs.
"""
