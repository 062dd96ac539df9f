"""Configs module.

Site configurations, the domains bound to them, and the facade that serves
configurations merged with their localized content.
"""
