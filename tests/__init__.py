"""
Tests for comparers

Orderings are checked by sorting every cyclic rotation of an already
ordered input with Python's stable sort.
"""
