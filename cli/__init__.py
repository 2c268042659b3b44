"""
fsrs-history CLI - Historical retention analytics for review logs

Commands:
- fsrs-history replay - Replay a review log and print the retention curve
- fsrs-history log tail/inspect - Review log operations
- fsrs-history version - Version information
"""

__version__ = "0.1.0"
