"""
Store handlers, one module per entity
"""
