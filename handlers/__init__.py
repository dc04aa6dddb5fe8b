"""
Lambda entry points.
"""
