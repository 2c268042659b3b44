"""
Command groups for the fsrs-history CLI.
"""
