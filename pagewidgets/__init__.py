"""pagewidgets: small interactive widgets for the terminal.

A sequential two-operand calculator, a contrast toggle, a persisted to-do
list and a form validator. Each widget reports to the user through a
notifier and keeps its state in a JSON key/value store.

Usage:
    python -m pagewidgets calc "5+3*2="          # Feed keys, print display
    python -m pagewidgets calc                   # Interactive keypad
    python -m pagewidgets theme --toggle         # Flip contrast mode
    python -m pagewidgets todo add "Buy milk"    # Add a to-do item
    python -m pagewidgets validate --name Ada --email ada@example.com
"""
