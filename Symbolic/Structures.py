# Structures.py
"""""
Containers keyed by logical equality instead of object identity.

Contents
--------
- EqualComparable / Hashable: the capability pair a key has to provide.
- LinkedList: LIFO singly linked chain; lookup and removal go through equals().
- HashMap: separate chaining over LinkedList buckets, keyed by hashcode()/equals().

The simplifier uses HashMap to count structurally identical sub-expressions.
Keys are never derived from str(): two different trees can print the same way.
"""""

import logging
from abc import ABC, abstractmethod

from . import error as E

logger = logging.getLogger(__name__)


# -----------------------------
# Capability interfaces
# -----------------------------

class EqualComparable(ABC):
    """Anything that defines its own logical equality."""

    @abstractmethod
    def equals(self, other):
        """Return True if this object is logically equal to 'other'.

        Hashable implementations: equal objects MUST return the same hashcode(),
        otherwise HashMap lookups silently miss.
        """


class Hashable(EqualComparable):
    """EqualComparable that can also be used as a HashMap key."""

    @abstractmethod
    def hashcode(self):
        """Return an int; need not be unique, must agree with equals()."""


class BetterMap(ABC):
    """Minimal map surface shared by the map implementations."""

    @abstractmethod
    def get(self, key, default=None):
        ...

    @abstractmethod
    def put(self, key, value):
        ...

    @abstractmethod
    def remove(self, key):
        ...

    @abstractmethod
    def has(self, key):
        ...

    @abstractmethod
    def keys(self):
        ...

    @abstractmethod
    def values(self):
        ...

    @abstractmethod
    def length(self):
        ...


# -----------------------------
# Linked list
# -----------------------------

class _Node:
    __slots__ = ("item", "next")

    def __init__(self, item, next=None):
        self.item = item
        self.next = next


class LinkedList:
    """Singly linked list; the most recently pushed element comes first.

    Iterating restarts from the head every time. Mutating the list while an
    iteration over it is in progress is not supported.
    """

    def __init__(self):
        self.root = None
        self.size = 0

    def __iter__(self):
        current = self.root
        while current is not None:
            yield current.item
            current = current.next

    def __len__(self):
        return self.size

    def __contains__(self, item):
        return self.has(item)

    def push(self, item):
        """Prepend 'item'."""
        self.root = _Node(item, self.root)
        self.size += 1

    def pop(self):
        """Remove and return the head, or None if the list is empty."""
        if self.root is None:
            return None

        item = self.root.item
        self.root = self.root.next
        self.size -= 1
        return item

    def peek(self):
        """Return the head without removing it, or None if the list is empty."""
        if self.root is None:
            return None
        return self.root.item

    def remove(self, item):
        """Remove the first element equal to 'item'. Returns True if one was removed."""
        previous = None
        current = self.root

        while current is not None:
            if item.equals(current.item):
                if previous is None:
                    self.root = current.next
                else:
                    previous.next = current.next
                self.size -= 1
                return True

            previous = current
            current = current.next

        return False

    def has(self, item):
        """Return True if some element is equal to 'item'."""
        for element in self:
            if item.equals(element):
                return True
        return False

    def length(self):
        return self.size


# -----------------------------
# Hash map
# -----------------------------

class _Entry(EqualComparable):
    """Key/value pair stored in a bucket; entries compare by key only."""

    def __init__(self, key, value):
        self.key = key
        self.value = value

    def equals(self, other):
        if not isinstance(other, _Entry):
            return False
        return self.key.equals(other.key)


class HashMap(BetterMap):
    """Hash map using separate chaining with LinkedLists.

    Keys must implement Hashable. Iteration order (keys(), values()) follows the
    bucket layout, not insertion order.
    """

    DEFAULT_BUCKET_COUNT = 16
    DEFAULT_LOAD_FACTOR = 0.75

    def __init__(self, bucket_count=None, load_factor=None):
        if bucket_count is None:
            bucket_count = HashMap.DEFAULT_BUCKET_COUNT
        if load_factor is None:
            load_factor = HashMap.DEFAULT_LOAD_FACTOR

        if load_factor <= 0.4:
            raise E.ConfigurationError(
                f"Load factor is too low! The load factor must be greater than 0.4, got {load_factor}",
                code="1500")
        if bucket_count < 1:
            raise E.ConfigurationError(f"Bucket count must be at least 1, got {bucket_count}", code="1501")

        self.buckets = [LinkedList() for _ in range(bucket_count)]
        self.load_factor = load_factor
        self.size = 0

    def _bucket(self, key):
        return self.buckets[key.hashcode() % len(self.buckets)]

    def get(self, key, default=None):
        """Return the value stored for 'key', or 'default' if there is none."""
        for entry in self._bucket(key):
            if key.equals(entry.key):
                return entry.value
        return default

    def _rehash(self):
        old_buckets = self.buckets
        self.buckets = [LinkedList() for _ in range(len(old_buckets) * 2)]
        self.size = 0

        logger.debug("Rehashing %d -> %d buckets", len(old_buckets), len(self.buckets))

        for bucket in old_buckets:
            for entry in bucket:
                self.put(entry.key, entry.value)

    def put(self, key, value):
        """Store 'value' for 'key', replacing any value already stored for an equal key."""
        if (self.size + 1) > (len(self.buckets) * self.load_factor):
            self._rehash()

        bucket = self._bucket(key)

        for entry in bucket:
            if key.equals(entry.key):
                entry.value = value
                return

        bucket.push(_Entry(key, value))
        self.size += 1

    def remove(self, key):
        """Remove 'key'. Returns True if it was present."""
        if self._bucket(key).remove(_Entry(key, None)):
            self.size -= 1
            return True
        return False

    def has(self, key):
        return self._bucket(key).has(_Entry(key, None))

    __contains__ = has

    def keys(self):
        return [entry.key for bucket in self.buckets for entry in bucket]

    def values(self):
        return [entry.value for bucket in self.buckets for entry in bucket]

    def length(self):
        return self.size

    def __len__(self):
        return self.size
