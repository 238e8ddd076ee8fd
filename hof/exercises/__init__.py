"""The exercises themselves: one factory per module, each closing over its own state.

Kept free of registry/walkthrough concerns so each module reads on its own.
"""
