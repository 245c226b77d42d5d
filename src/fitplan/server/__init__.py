"""
HTTP API for FitPlan.
"""
