"""Classic searching, sorting, array and dynamic-programming algorithms, and a linked list."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "knapsack",
    "linked_list",
    "partitions",
    "searching",
    "sorting",
    "subsequences",
]