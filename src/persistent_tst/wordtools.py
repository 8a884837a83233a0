import os
import sys
import random
import warnings
from os.path import exists

import psutil

from .insertion_order import median_split_vocabulary
from .tst import TernarySearchTree

ENGLISH_LOWER = "abcdefghijklmnopqrstuvwxyz"
ENGLISH_UPPER = ENGLISH_LOWER.upper()
ENGLISH = ENGLISH_LOWER + ENGLISH_UPPER


def extract_words(wordlist,
                  delimiter=None,
                  field=0,
                  lower=False,
                  comment="#"
                  ):
    """Generator that filters lines and extracts words from a word list.

    Parameters
    ----------
    wordlist : iterable of str
        Word list text stream, typically an opened file to read from
    delimiter : str
        String that delimits fields (word, frequency, ..) in lines.
        None splits on runs of whitespace.
    field : int
        Field where the word can be found
    lower : bool
        Treat all characters as lowercase
    comment : str
        Lines starting with this string are skipped.
        Falsy values keep all lines.

    Yields
    -------
    str
        Each word in order of appearance, duplicates included.
    """
    for idx, line_ in enumerate(wordlist):

        line = line_.strip()

        if not line:
            continue

        if comment and line.startswith(comment):
            continue

        if lower:
            line = line.lower()

        fields = line.split(delimiter)

        if len(fields) <= field:
            msg = f"Line ({idx}) with fewer fields than {field + 1} " \
                  f"({len(fields)} encountered):\n{line_}"
            warnings.warn(msg)
            continue

        yield fields[field]


def build_tree(words, balanced=False, tree=None):
    """Inserts words into a ternary search tree.

    Parameters
    ----------
    words : iterable of sequences or Counter
        Words to be inserted
    balanced : bool
        Insert in median split order (see insertion_order), which
        requires all words up front. A Counter weights each word
        by its frequency.
    tree : TernarySearchTree
        Tree to insert into, defaults to the empty tree.
        It is not modified.

    Returns
    -------
    TernarySearchTree
    """
    if tree is None:
        tree = TernarySearchTree()

    if balanced:
        words = median_split_vocabulary(words)

    for word in words:
        tree = tree.insert(word)

    return tree


def load_tree(path, balanced=False, verbose=False, every_n=1000,
              text_buffer=sys.stdout, **kwargs):
    """Convenience function to build a tree from a word list file.

    Parameters
    ----------
    path : str or path
        Path to word list, one word per line
    balanced : bool
        Insert in median split order
    verbose : bool
        Write progress to text_buffer
    every_n : int
        Write progress every every_n words
    text_buffer : buffer
        Reports will be written by calling text_buffer.write() method

    Notes
    -----
    Other keyword arguments are passed on to extract_words.
    """
    if not exists(path):
        msg = f"'{path}' does not exist!"
        raise OSError(msg)

    with open(path) as wordlist:
        words = extract_words(wordlist, **kwargs)

        # reorder first, so progress counts insertions
        if balanced:
            words = median_split_vocabulary(words)

        if verbose:
            template = "\rInserted {count} words ({memory:.1f} MB)."
            words = verbose_generator(words, every_n=every_n,
                                      template=template,
                                      text_buffer=text_buffer)

        return build_tree(words)


def random_strings(num_strings, symbols=ENGLISH,
                   min_len=1, max_len=15, seed=None):
    """Yields num_strings random strings of length min_len to max_len.
    """
    rng = random.Random(seed)

    for _ in range(num_strings):
        length = rng.randint(min_len, max_len)
        yield "".join(rng.choices(symbols, k=length))


def random_string(length, symbols=ENGLISH, seed=None):
    return "".join(random.Random(seed).choices(symbols, k=length))


def verbose_generator(sequence, every_n=1000, total="?", template=None,
                      text_buffer=sys.stdout):
    """Yields elements from sequence, counts them and writes progress.

    Parameters
    ----------
    sequence : iterable
        Generator to add verbosity to
    every_n : int
        Write progress to text_buffer every every_n elements
    total : int
        Total number of elements expected
    template : str
        Template for the verbose message
    text_buffer : buffer
        Reports will be written by calling text_buffer.write() method

    Notes
    -----
    Template will be formatted with .format(), injecting:
        total - provided
        count - count of elements so far
        memory - total memory usage of process using generator
    """
    if not template:
        template = "\rConsumed {count} out of {total}."

    text_buffer.write("\n")
    count = 0

    for element in sequence:
        yield element
        count += 1

        if not count % every_n:
            _report(template, count, total, text_buffer)

    _report(template, count, total, text_buffer)
    text_buffer.write("\n")
    text_buffer.flush()


def _report(template, count, total, text_buffer):
    msg = template.format(count=count, total=total, memory=memory_usage())
    text_buffer.write(msg)
    text_buffer.flush()


def memory_usage():
    """Returns total memory usage of current process in MB.
    """
    process = psutil.Process(os.getpid())
    return process.memory_full_info().uss / 1024 / 1024
