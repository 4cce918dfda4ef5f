"""In-memory data structures and algorithms: containers, union-find, graphs, sorting, substring search."""
from .config import Settings, get_settings, load_settings, reset_settings
from .containers import BinarySearchTree, Deque, HashTable, LinkedList, MinStack, Queue, Stack
from .errors import DsaError, ElementOutOfRangeError, InvalidArgumentError
from .graph import Graph
from .logs import JsonFormatter, configure_logging
from .matching import kmp_search, naive_search, prefix_table, rabin_karp_search
from .sorting import binary_search, counting_sort, heap_sort, is_sorted, merge_sort, quicksort, radix_sort
from .union_find import UnionFind

__version__ = "0.1.0"

__all__ = [
    "BinarySearchTree", "Deque", "HashTable", "LinkedList", "MinStack", "Queue", "Stack",
    "UnionFind", "Graph",
    "quicksort", "merge_sort", "heap_sort", "counting_sort", "radix_sort", "binary_search", "is_sorted",
    "kmp_search", "rabin_karp_search", "prefix_table", "naive_search",
    "Settings", "get_settings", "load_settings", "reset_settings",
    "JsonFormatter", "configure_logging",
    "DsaError", "InvalidArgumentError", "ElementOutOfRangeError",
]
