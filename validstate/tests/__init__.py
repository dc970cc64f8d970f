"""
Test suite for validated reducers.

Focus areas:
- Pass-through of everything except the error key
- Fresh report on every transition
- Enhancer delegation and composition
- Replay determinism
"""
