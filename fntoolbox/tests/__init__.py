"""
Test suite for fntoolbox.

Focus areas:
- Function transformers (curry, partial, rearg, locker, Y)
- Dispatch by key
- Reducer builders
- Action log replay
"""
