"""
Implementation modules for the CLI commands.
"""
