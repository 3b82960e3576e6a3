import pytest

from xlex.yamlcore.collectionstack import CollectionStack, CollectionType


def test_empty_has_no_collection():
    stack = CollectionStack()
    assert stack.current_type() is CollectionType.NO_COLLECTION
    assert len(stack) == 0


def test_push_and_pop_nested():
    stack = CollectionStack()
    stack.push(CollectionType.BLOCK_MAP)
    stack.push(CollectionType.FLOW_SEQ)
    assert stack.current_type() is CollectionType.FLOW_SEQ
    stack.pop(CollectionType.FLOW_SEQ)
    assert stack.current_type() is CollectionType.BLOCK_MAP
    stack.pop(CollectionType.BLOCK_MAP)
    assert stack.current_type() is CollectionType.NO_COLLECTION


def test_pop_wrong_kind_raises():
    stack = CollectionStack()
    stack.push(CollectionType.COMPACT_MAP)
    with pytest.raises(ValueError):
        stack.pop(CollectionType.FLOW_MAP)
    assert stack.current_type() is CollectionType.COMPACT_MAP


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        CollectionStack().pop(CollectionType.NO_COLLECTION)