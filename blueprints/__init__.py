"""
Flask blueprints of the analysis API.
"""
