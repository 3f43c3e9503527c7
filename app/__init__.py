"""
ChefGemini HTTP API.
"""
