"""
PR Ticket Verifier - checks pull request descriptions for a valid tracker ticket link.
"""

__version__ = "0.1.0"
