"""Tests for ContextVar-based configuration."""

from threading import Thread

import pytest

from treetext import (
    TreeTextConfig,
    config_context,
    get_config,
    render,
    reset_config,
    set_config,
)


@pytest.fixture(autouse=True)
def _clean_config():
    reset_config()
    yield
    reset_config()


class TestTreeTextConfigDataclass:
    def test_default_values(self) -> None:
        config = TreeTextConfig()
        assert config.empty_placeholder == "Empty tree"
        assert config.error_label == "Error"

    def test_immutability(self) -> None:
        config = TreeTextConfig()
        with pytest.raises(AttributeError):
            config.error_label = "Oops"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = TreeTextConfig.from_dict({"error_label": "Fehler", "color": "red"})
        assert config.error_label == "Fehler"
        assert config.empty_placeholder == "Empty tree"


class TestContextVarFunctions:
    def test_default_config(self) -> None:
        assert get_config() == TreeTextConfig()

    def test_set_and_reset(self) -> None:
        set_config(TreeTextConfig(empty_placeholder="nothing"))
        assert render(None) == "nothing"
        reset_config()
        assert render(None) == "Empty tree"

    def test_context_manager_restores(self) -> None:
        with config_context(TreeTextConfig(empty_placeholder="inner")):
            assert render(None) == "inner"
        assert render(None) == "Empty tree"

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with config_context(TreeTextConfig(empty_placeholder="inner")):
                raise RuntimeError("boom")
        assert get_config().empty_placeholder == "Empty tree"


class TestThreadIsolation:
    def test_other_threads_see_default(self) -> None:
        seen: list[str] = []

        def worker() -> None:
            seen.append(render(None))

        set_config(TreeTextConfig(empty_placeholder="main thread only"))
        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == ["Empty tree"]
        assert render(None) == "main thread only"
