"""CLI commands.

Every module in this package that defines a `command` object is
auto-registered by mandprint.registry.discover(). The module docstring
doubles as the command's `mandprint help <command>` text.
"""
