from knotbind import Registry, StoreItem, Token


def _item():
    return StoreItem(factory=lambda _, __: object())


def test_new_item_is_uninitialized_and_empty():
    item = _item()
    assert item.initialized is False
    assert item.instance is None


def test_get_missing_returns_none():
    registry = Registry()

    class Service: ...

    assert registry.get(Service) is None
    assert Service not in registry


def test_set_then_get():
    registry = Registry()
    item = _item()

    class Service: ...

    registry.set(Service, item)
    assert registry.get(Service) is item
    assert Service in registry


def test_set_overwrites_only_that_identifier():
    registry = Registry()
    token = Token("service")
    first, second = _item(), _item()

    class Service: ...

    registry.set(token, first)
    registry.set(Service, first)
    registry.set(Service, second)

    assert registry.get(Service) is second
    assert registry.get(token) is first
    assert len(registry) == 2


def test_keys_are_identity_not_equality():
    class AllEqual(type):
        def __eq__(cls, other):
            return True

        def __hash__(cls):
            return 0

    class A(metaclass=AllEqual): ...

    class B(metaclass=AllEqual): ...

    registry = Registry()
    item = _item()
    registry.set(A, item)

    assert A == B
    assert registry.get(A) is item
    assert registry.get(B) is None


def test_items_compare_by_identity():
    factory = lambda _, __: object()  # noqa: E731
    assert StoreItem(factory=factory) != StoreItem(factory=factory)
