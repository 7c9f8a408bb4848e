"""Web interface"""
