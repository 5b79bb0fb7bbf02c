import asyncio
from types import SimpleNamespace

from oneliners.domain.runtime import is_node_process, is_promise


class TestIsNodeProcess:
    def test_mapping_with_node_version(self) -> None:
        assert is_node_process({"versions": {"node": "20.11.0"}}) is True

    def test_object_with_node_version(self) -> None:
        process = SimpleNamespace(versions={"node": "18.0.0", "v8": "10.2"})
        assert is_node_process(process) is True

    def test_nested_objects(self) -> None:
        process = SimpleNamespace(versions=SimpleNamespace(node="22.1.0"))
        assert is_node_process(process) is True

    def test_missing_node_version(self) -> None:
        assert is_node_process({"versions": {"deno": "1.40"}}) is False

    def test_missing_versions(self) -> None:
        assert is_node_process({}) is False
        assert is_node_process(SimpleNamespace()) is False

    def test_none(self) -> None:
        assert is_node_process(None) is False
        assert is_node_process({"versions": None}) is False


class TestIsPromise:
    def test_thenable_object(self) -> None:
        assert is_promise(SimpleNamespace(then=lambda *args: None)) is True

    def test_thenable_function(self) -> None:
        def fn() -> None:
            pass

        fn.then = lambda *args: None  # type: ignore[attr-defined]
        assert is_promise(fn) is True

    def test_empty_container_thenable(self) -> None:
        """An empty (falsy) container with a callable then still counts."""

        class EmptyThenable(list):
            def then(self, *args):
                return None

        assert is_promise(EmptyThenable()) is True

    def test_non_callable_then(self) -> None:
        assert is_promise(SimpleNamespace(then=True)) is False

    def test_plain_values(self) -> None:
        assert is_promise(None) is False
        assert is_promise(0) is False
        assert is_promise({"then": lambda: None}) is False
        assert is_promise(object()) is False

    def test_asyncio_future_is_not_thenable(self) -> None:
        loop = asyncio.new_event_loop()
        try:
            assert is_promise(loop.create_future()) is False
        finally:
            loop.close()
