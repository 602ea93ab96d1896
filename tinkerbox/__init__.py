"""Small tools: identifiers, an AVL tree, estimators, choosers, float inspection and more."""

__version__ = "0.1.0"