"""Classic algorithms and small data structures: trees, linked lists, strings, arithmetic, arrays, dynamic programming, graphs, designs and grids."""

__version__ = "0.1.0"