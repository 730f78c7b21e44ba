"""Exceptions raised by :class:`bktree.tree.BKTree`."""


class BKTreeError(Exception):
    """Base class for all BK-tree errors."""


class InvalidArgumentError(BKTreeError, ValueError):
    """A required element, collection, radius or distance function is ``None``."""


class TypeMismatchError(BKTreeError, TypeError):
    """A queried value is incompatible with the tree's element type."""


class UnsupportedOperationError(BKTreeError, NotImplementedError):
    """Elements cannot be removed from a BK-tree."""
