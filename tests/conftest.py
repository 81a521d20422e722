"""
Fixtures compartilhadas: nó falso da camada de apresentação e dispatcher manual.
"""

import logging
import os
from typing import Any, Callable, List, Sequence, Tuple

import pytest

from lazy_explorer.core import Entry


class FakeNode:
    """Registra as chamadas feitas pelo LazyLoader, como um item de árvore faria."""

    def __init__(self, entry: Entry):
        self.content = entry
        self.children: List[Entry] = []
        self.expanded = False
        self.loading = False
        self.loading_history: List[bool] = []
        self.attach_calls = 0
        self.alive = True

    @property
    def child_count(self) -> int:
        return len(self.children)

    def set_expanded(self, expanded: bool) -> None:
        self.expanded = expanded

    def set_loading_indicator(self, loading: bool) -> None:
        self.loading = loading
        self.loading_history.append(loading)

    def attach_children(self, entries: Sequence[Entry]) -> None:
        self.attach_calls += 1
        self.children.extend(entries)

    def is_alive(self) -> bool:
        return self.alive


class ManualDispatcher:
    """Enfileira o trabalho de fundo até `run_pending()`; a parte de UI roda na hora."""

    def __init__(self) -> None:
        self.jobs: List[Tuple[Callable[..., Any], Tuple[Any, ...]]] = []

    def run_in_background(self, func: Callable[..., Any], *args: Any) -> None:
        self.jobs.append((func, args))

    def run_on_ui(self, func: Callable[..., Any], *args: Any) -> None:
        func(*args)

    def run_pending(self) -> None:
        jobs, self.jobs = self.jobs, []
        for func, args in jobs:
            func(*args)


@pytest.fixture
def make_node() -> Callable[[str], FakeNode]:
    def _make(path: str, has_children: bool = True) -> FakeNode:
        return FakeNode(Entry(os.path.basename(path.rstrip("/\\")) or path, path, has_children))
    return _make


@pytest.fixture
def manual_dispatcher() -> ManualDispatcher:
    return ManualDispatcher()


@pytest.fixture
def sample_dir(tmp_path):
    """
    tmp_path/
        empty_sub/
        full_sub/inner.txt
        nested_sub/deeper/
        a.txt
        b.log
    """
    (tmp_path / "empty_sub").mkdir()
    (tmp_path / "full_sub").mkdir()
    (tmp_path / "full_sub" / "inner.txt").write_text("x")
    (tmp_path / "nested_sub" / "deeper").mkdir(parents=True)
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.log").write_text("b")
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Remove o handler de stderr instalado por configure_logging entre os testes."""
    yield
    logger = logging.getLogger("lazy_explorer")
    for handler in list(logger.handlers):
        if getattr(handler, "_lazy_explorer_handler", False):
            logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
