"""
Command Line Interface Package

Command Structure:
- expenses add / list / update / delete / summary / breakdown: expense commands
- expenses version / config / info: utility commands

Tracker errors are reported on stderr and mapped to distinct exit codes
(see ``expenses.cli.errors``).
"""
