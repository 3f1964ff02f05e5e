"""
Default command package scanned at boot (COMMANDS_PACKAGE).

Each public module, or `entrypoint.py` of a subpackage, declares its
commands through COMMAND / COMMANDS or a register(context) function.
"""
