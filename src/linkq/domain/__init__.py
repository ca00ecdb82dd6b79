"""Domain layer — nodes and the algorithms that relink them.

This layer depends only on the standard library.
It must never import from config or from the queue facade.
"""
