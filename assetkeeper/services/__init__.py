"""
Outbound integrations
"""
