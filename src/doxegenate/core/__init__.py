"""
Core Package.

Contains the line-oriented annotation logic:
- Signature heuristics (declaration parsing, comment rendering)
- Class scope tracking
- Annotation Engine and file commenter
"""
