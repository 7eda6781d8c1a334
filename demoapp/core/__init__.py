"""
Core utilities shared across the demo API.

Configuration, logging bootstrap and cross-cutting middleware live here so
routers/services never read os.environ or configure handlers themselves.
"""
