"""Utility modules for tagcloud.

- logging: stderr logger setup for the CLI
- output: shared Rich console
"""
