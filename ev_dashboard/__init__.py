"""
EV adoption dashboard: CSV loading, filtering and Plotly chart builders.
"""

__version__ = "0.1.0"
