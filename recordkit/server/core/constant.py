"""
Server constants.
"""

PROJECT_NAME = "recordkit"
API_V1_STR = "/api/v1"
