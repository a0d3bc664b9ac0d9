import pytest

from acffields.core.entity_keys import UserKey
from acffields.transforms import DEFAULT_HOOK_NAME, TransformChain, as_transform_chain


def test_empty_chain_is_identity():
    chain = TransformChain()
    value = {"nested": [1, 2]}

    assert chain(value, UserKey(1), {"value": value}) is value
    assert len(chain) == 0


def test_callbacks_run_in_order_and_chain_results():
    chain = TransformChain()
    chain.add(lambda value, key, field, hook: value + "a")
    chain.add(lambda value, key, field, hook: value + "b")

    assert chain("x", UserKey(1), None) == "xab"


def test_callbacks_receive_key_field_and_hook_name():
    seen = []
    chain = TransformChain([lambda *args: seen.append(args) or args[0]])
    key = UserKey(42)
    field = {"value": 1, "type": "number"}

    chain(1, key, field, "custom_hook")

    assert seen == [(1, key, field, "custom_hook")]


def test_hook_name_defaults():
    chain = TransformChain([lambda value, key, field, hook: hook])
    assert chain(None, UserKey(1), None) == DEFAULT_HOOK_NAME == "ln_acf_field"


def test_add_works_as_decorator_and_remove():
    chain = TransformChain()

    @chain.add
    def double(value, key, field, hook):
        return value * 2

    assert chain(2, UserKey(1), None) == 4
    chain.remove(double)
    assert chain(2, UserKey(1), None) == 2


def test_add_rejects_non_callable():
    with pytest.raises(TypeError):
        TransformChain().add("nope")


def test_as_transform_chain_normalises_inputs():
    fn = lambda value, key, field, hook: value  # noqa: E731
    chain = TransformChain()

    assert len(as_transform_chain(None)) == 0
    assert as_transform_chain(chain) is chain
    assert len(as_transform_chain(fn)) == 1
    assert len(as_transform_chain([fn, fn])) == 2
