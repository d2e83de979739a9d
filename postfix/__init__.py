"""
A small postfix (reverse Polish) calculator language.
"""
