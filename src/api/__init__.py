"""
Garment Grid REST API (FastAPI).
"""
