"""
Command subsystem.

Components:
- parser.py: raw text -> command value (prefix dispatch + validation)
- commands.py: command values and execute_command()
- help.py: help topics
"""
