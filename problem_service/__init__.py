"""
Problem / Topic 管理 API
"""
__version__ = "1.0.0"
