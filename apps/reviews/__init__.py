"""Reviews app package.

Star ratings and comments that guests leave on places they reserved.
"""
