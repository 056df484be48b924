"""Chat app package: direct messages between two users."""
