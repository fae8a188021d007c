"""Installation discovery for unbrew.

Locates the prefix, parses the ignore-manifest and builds the
removal surface.
"""
