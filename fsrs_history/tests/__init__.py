"""
Test suite for historical replay.

Focus areas:
- Day bucketing with rollover
- Equivalence with the fsrs scheduler
- Forget isolation and hook dispatch
- Replay determinism
"""
