class EmptyTreeAccess(LookupError):
    """Raised when the root of an empty tree is accessed."""

    def __init__(self, msg="Ternary search tree empty."):
        super().__init__(msg)


class Node():
    __slots__ = ("value", "word", "left", "center", "right")

    def __init__(self, value, word, left=None, center=None, right=None):
        setattr_ = super().__setattr__
        setattr_("value", value)
        setattr_("word", word)

        setattr_("left", left)
        setattr_("center", center)
        setattr_("right", right)

    def __setattr__(self, name, value):
        raise AttributeError(f"Node is immutable, cannot set '{name}'")


class TernarySearchTree():
    """Persistent ternary search tree over sequences of ordered symbols.

    Trees are never modified. Insertion returns a new tree that shares
    every node off the insertion path with the tree it started from, so
    old and new trees remain valid side by side.
    """

    __slots__ = ("_root",)

    def __init__(self, sequence=()):
        """Initializes tree as a path spelling sequence.

        Parameters
        ----------
        sequence : sequence
            Symbols of a single word, e.g. a str.
            An empty sequence (default) gives the empty tree.
        """
        root = None
        last = len(sequence) - 1

        # build the chain bottom up, word marker on the last symbol
        for idx in range(last, -1, -1):
            root = Node(sequence[idx], idx == last, center=root)

        object.__setattr__(self, "_root", root)

    @classmethod
    def _from_root(cls, node):
        tree = cls.__new__(cls)
        object.__setattr__(tree, "_root", node)
        return tree

    def insert(self, sequence):
        """Return tree with sequence added.

        Parameters
        ----------
        sequence : sequence
            Word to be inserted.

        Returns
        -------
        TernarySearchTree
            New tree. Nodes not on the path of sequence are shared
            with this tree.

        Notes
        -----
        Inserting the empty sequence returns this tree unchanged.
        """
        if not len(sequence):
            return self

        return self._from_root(self._insert(sequence, self._root))

    def _insert(self, sequence, node):
        """Insert sequence below node, rebuilding the path bottom up.
        """
        path = []
        idx = 0

        while node is not None and idx < len(sequence):
            symbol = sequence[idx]

            if symbol > node.value:
                path.append((node, "right", idx))
                node = node.right
            elif symbol < node.value:
                path.append((node, "left", idx))
                node = node.left
            else:
                path.append((node, "center", idx))
                node = node.center
                idx += 1

        if idx < len(sequence):
            node = TernarySearchTree(sequence[idx:])._root

        for parent, branch, position in reversed(path):
            if branch == "right":
                node = Node(parent.value, parent.word,
                            parent.left, parent.center, node)
            elif branch == "left":
                node = Node(parent.value, parent.word,
                            node, parent.center, parent.right)
            else:
                last = position + 1 == len(sequence)
                node = Node(parent.value, parent.word or last,
                            parent.left, node, parent.right)

        return node

    def _prefix_search(self, sequence):
        """Walk sequence down the tree as far as it goes.

        Returns the number of symbols matched and the node
        that matched the last of them (None if none did).
        """
        node = self._root
        matched = None
        length = 0

        while node is not None and length < len(sequence):
            symbol = sequence[length]

            if symbol < node.value:
                node = node.left
            elif symbol > node.value:
                node = node.right
            else:
                matched = node
                node = node.center
                length += 1

        return length, matched

    def exists(self, sequence):
        """Return whether sequence is stored in the tree.
        """
        length, node = self._prefix_search(sequence)
        return length == len(sequence) and node is not None and node.word

    def prefix(self, sequence):
        """Return longest prefix of sequence that some stored word starts with.

        Parameters
        ----------
        sequence : sequence

        Returns
        -------
        sequence
            Slice of sequence (same type).

        Notes
        -----
        The prefix need not be a stored word itself. For a tree holding
        "category", "functor" and "theory", the prefix of "catamorphism"
        is "cat".
        """
        length, _ = self._prefix_search(sequence)
        return sequence[:length]

    def fold(self, acc, function):
        """Reduce the tree with function(acc, tree) -> acc.

        Parameters
        ----------
        acc : object
            Initial value, returned as is for the empty tree.
        function : callable
            Called with the accumulator and a TernarySearchTree.

        Notes
        -----
        Left, center and right subtrees are folded in that order,
        each starting from the result of the previous one. The tree
        itself is passed to function last.
        """
        stack = [(self._root, False)]

        while stack:
            node, visited = stack.pop()
            if node is None:
                continue

            if visited:
                acc = function(acc, self._from_root(node))
                continue

            # popped in reverse: left, center, right, then the node itself
            stack.append((node, True))
            stack.append((node.right, False))
            stack.append((node.center, False))
            stack.append((node.left, False))

        return acc

    def size(self):
        """Return number of nodes in the tree.
        """
        return self.fold(0, lambda acc, _: acc + 1)

    def word_count(self):
        """Return number of words stored in the tree.
        """
        return self.fold(0, lambda acc, tree: acc + tree.word)

    def completions(self, prefix="", full=True):
        """Return all stored words beginning with prefix.

        Parameters
        ----------
        prefix : sequence
            Sequence that all results begin with. Its type
            determines the type of the results.
        full : bool
            Flag for whether to return results with the prefix prepended.

        Returns
        -------
        Generator
            Yield each word in traversal order.
        """
        length, node = self._prefix_search(prefix)

        if length < len(prefix):
            return

        start = prefix if full else prefix[:0]

        if not prefix:
            node = self._root
        else:
            if node.word:
                yield start
            node = node.center

        for symbols in self._completions(node):
            completion = _as_sequence(prefix, symbols)
            yield start + completion if start else completion

    def _completions(self, node):
        """Generator yielding completions as lists of symbols.
        """
        stack = [(node, [])]

        while stack:
            node, path = stack.pop()
            if node is None:
                continue

            word = path + [node.value]
            if node.word:
                yield word

            stack.append((node.right, path))
            stack.append((node.left, path))
            stack.append((node.center, word))

    @property
    def value(self):
        return self._checked_root().value

    @property
    def word(self):
        return self._checked_root().word

    @property
    def left(self):
        return self._from_root(self._checked_root().left)

    @property
    def center(self):
        return self._from_root(self._checked_root().center)

    @property
    def right(self):
        return self._from_root(self._checked_root().right)

    @property
    def empty(self):
        return self._root is None

    def _checked_root(self):
        if self._root is None:
            raise EmptyTreeAccess()
        return self._root

    def __add__(self, sequence):
        return self.insert(sequence)

    def __contains__(self, sequence):
        """Adds "sequence in tree" syntactic sugar.
        """
        return self.exists(sequence)

    def __iter__(self):
        return self.completions()

    def __len__(self):
        return self.size()

    def __setattr__(self, name, value):
        raise AttributeError("TernarySearchTree is immutable")

    def __repr__(self):
        if self.empty:
            return "TernarySearchTree()"
        return f"TernarySearchTree(<{self.size()} nodes>)"


def _as_sequence(template, symbols):
    # only single characters are joined, other words come back as tuples
    if isinstance(template, str):
        if all(isinstance(symbol, str) and len(symbol) == 1
               for symbol in symbols):
            return "".join(symbols)
        return tuple(symbols)
    return type(template)(symbols)


def empty_tree():
    return TernarySearchTree()


def tree_from_sequence(sequence):
    return TernarySearchTree(sequence)


def is_empty(tree):
    return tree.empty


def insert(tree, sequence):
    return tree.insert(sequence)


def exists(tree, sequence):
    return tree.exists(sequence)


def longest_stored_prefix(tree, sequence):
    return tree.prefix(sequence)


def fold(tree, acc, function):
    return tree.fold(acc, function)


def size(tree):
    return tree.size()


def word_count(tree):
    return tree.word_count()
