"""
Interactive console layer for the ticket office.

Prompts collect and validate operator input, the menu dispatches to the
passenger registry and the presentation helpers render results with Rich.
"""
