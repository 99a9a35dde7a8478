"""Utility modules for reposync."""
