"""
Reference Configuration

Static export configuration: tiers, zone bounds, output settings.
"""
