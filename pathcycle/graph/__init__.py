"""Graph interoperability helpers.

The `convert` module maps path stores to and from NetworkX directed graphs.
"""
