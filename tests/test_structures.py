# tests/test_structures.py
"""
Tests for the equality-keyed containers: LinkedList and HashMap.
"""

import pytest

from Symbolic import E
from Symbolic import Addition, HashMap, LinkedList, Value, Variable


class TestLinkedList:

    def test_push_pop_is_lifo(self):
        ll = LinkedList()
        for name in ("a", "b", "c"):
            ll.push(Variable(name))
        assert ll.length() == 3
        assert ll.pop() == Variable("c")
        assert ll.pop() == Variable("b")
        assert ll.pop() == Variable("a")
        assert ll.pop() is None
        assert len(ll) == 0

    def test_peek_does_not_remove(self):
        ll = LinkedList()
        assert ll.peek() is None
        ll.push(Value(1))
        assert ll.peek() == Value(1)
        assert ll.length() == 1

    def test_has_uses_structural_equality(self):
        ll = LinkedList()
        ll.push(Addition([Variable("x"), Value(2)]))
        assert ll.has(Addition([Value(2), Variable("x")]))
        assert Variable("x") not in ll

    def test_remove_head(self):
        ll = LinkedList()
        ll.push(Variable("a"))
        ll.push(Variable("b"))
        assert ll.remove(Variable("b"))
        assert list(ll) == [Variable("a")]
        assert ll.length() == 1

    def test_remove_middle_and_tail(self):
        ll = LinkedList()
        for name in ("a", "b", "c"):
            ll.push(Variable(name))
        assert ll.remove(Variable("b"))
        assert ll.remove(Variable("a"))
        assert list(ll) == [Variable("c")]

    def test_remove_only_element(self):
        ll = LinkedList()
        ll.push(Value(3))
        assert ll.remove(Value(3.0))
        assert ll.peek() is None
        assert not ll.remove(Value(3))

    def test_remove_missing(self):
        ll = LinkedList()
        ll.push(Value(1))
        ll.push(Value(2))
        assert not ll.remove(Value(5))
        assert ll.length() == 2

    def test_iteration_restarts(self):
        ll = LinkedList()
        ll.push(Value(1))
        ll.push(Value(2))
        assert list(ll) == [Value(2), Value(1)]
        assert list(ll) == [Value(2), Value(1)]


class TestHashMap:

    def test_put_get(self):
        m = HashMap()
        m.put(Variable("x"), Value(4))
        assert m.get(Variable("x")) == Value(4)
        assert m.get(Variable("y")) is None
        assert m.get(Variable("y"), 7) == 7

    def test_put_replaces_value(self):
        m = HashMap()
        m.put(Variable("x"), 1)
        m.put(Variable("x"), 2)
        assert m.get(Variable("x")) == 2
        assert m.length() == 1

    def test_remove(self):
        m = HashMap()
        m.put(Variable("x"), 1)
        assert m.remove(Variable("x"))
        assert not m.has(Variable("x"))
        assert not m.remove(Variable("x"))
        assert len(m) == 0

    def test_anagram_keys_stay_distinct(self):
        # "ab" and "ba" share a hashcode and therefore a bucket
        assert Variable("ab").hashcode() == Variable("ba").hashcode()
        m = HashMap()
        m.put(Variable("ab"), 1)
        m.put(Variable("ba"), 2)
        assert m.get(Variable("ab")) == 1
        assert m.get(Variable("ba")) == 2
        assert m.length() == 2

    def test_commutative_keys_share_an_entry(self):
        x, y = Variable("x"), Variable("y")
        m = HashMap()
        m.put(Addition([x, y]), "sum")
        assert m.has(Addition([y, x]))
        assert Addition([y, x]) in m

    def test_rehash_keeps_entries(self):
        m = HashMap(2)
        for i in range(100):
            m.put(Variable(f"v{i}"), i)
        assert len(m.buckets) > 2
        assert m.length() == 100
        for i in range(100):
            assert m.get(Variable(f"v{i}")) == i

    def test_keys_values_aligned(self):
        m = HashMap()
        for i in range(20):
            m.put(Value(i), i * 10)
        pairs = dict(zip(m.keys(), m.values()))
        assert len(pairs) == 20
        for key, value in pairs.items():
            assert value == key.value * 10

    @pytest.mark.parametrize("load_factor", [0.4, 0.1, 0.0, -1])
    def test_low_load_factor_rejected(self, load_factor):
        with pytest.raises(E.ConfigurationError) as info:
            HashMap(16, load_factor)
        assert info.value.code == "1500"

    def test_load_factor_just_above_limit(self):
        m = HashMap(load_factor=0.41)
        m.put(Value(1), 1)
        assert m.get(Value(1)) == 1

    def test_empty_bucket_array_rejected(self):
        with pytest.raises(E.ConfigurationError) as info:
            HashMap(0)
        assert info.value.code == "1501"

    def test_equal_keys_equal_hashcodes(self):
        x, y, z = Variable("x"), Variable("y"), Variable("z")
        pairs = [
            (Value(2), Value(2.0)),
            (Value(0.0), Value(-0.0)),
            (Variable("abc"), Variable("abc")),
            (Addition([x, y, z]), Addition([z, x, y])),
        ]
        for k1, k2 in pairs:
            assert k1.equals(k2)
            assert k1.hashcode() == k2.hashcode()
