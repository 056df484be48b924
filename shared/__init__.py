"""
Shared Kernel

Building blocks reused by every domain app: API exceptions with their
HTTP status codes and the project-wide DRF exception handler.
"""
