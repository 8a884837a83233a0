from .tst import EmptyTreeAccess, Node, TernarySearchTree
from .tst import empty_tree, tree_from_sequence, is_empty
from .tst import insert, exists, longest_stored_prefix
from .tst import fold, size, word_count
from .insertion_order import median_split_vocabulary
from .wordtools import ENGLISH, ENGLISH_LOWER, ENGLISH_UPPER
from .wordtools import extract_words, build_tree, load_tree
from .wordtools import random_string, random_strings
from .wordtools import verbose_generator, memory_usage
