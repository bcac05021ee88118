"""Templates — declarative descriptions of a URL's path and query shape.

Templates are declared at startup and never change afterwards; builder
methods return new values instead of mutating.
"""
