"""
Utilities Package.

Console output and logging helpers shared by the CLI and the commenter.
"""
