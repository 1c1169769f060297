"""Classic data structures and algorithms: stacks, a circular queue, linked
lists, a list cursor, a binary search tree, heap sort and quick sort,
bracket checking and postfix evaluation, each with a command-line front end."""

__version__ = "0.1.0"