"""Places app package.

Listings published by OWNER accounts together with the single facility
sheet and house-rules regulation attached to each listing.
"""
