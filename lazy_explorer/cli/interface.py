import os
import sys
from typing import List, Optional, Sequence

from ..core import Entry, InlineDispatcher, LazyLoader, can_expand, root_entries


class ConsoleNode:
    """Nó mínimo para o modo CLI: guarda os filhos em memória em vez de um widget."""

    def __init__(self, entry: Entry):
        self.content = entry
        self.children: List['ConsoleNode'] = []
        self.expanded = False
        self.loading = False

    @property
    def child_count(self) -> int:
        return len(self.children)

    def set_expanded(self, expanded: bool):
        self.expanded = expanded

    def set_loading_indicator(self, loading: bool):
        self.loading = loading

    def attach_children(self, entries: Sequence[Entry]):
        self.children.extend(ConsoleNode(e) for e in entries)

    def is_alive(self) -> bool:
        return True


def _format_entry(entry: Entry) -> str:
    """'+' marca itens expansíveis; toda pasta recebe '/' no final."""
    marker = "+" if can_expand(entry) else " "
    # Raízes como '/' ou 'C:\' já terminam com separador
    is_dir = os.path.isdir(entry.full_path) and not entry.name.endswith(("/", "\\"))
    suffix = "/" if is_dir else ""
    return f"{marker} {entry.name}{suffix}"


def cli_list_roots(drives: Optional[Sequence[str]] = None) -> int:
    """Imprime as unidades/volumes disponíveis."""
    for entry in root_entries(drives):
        print(_format_entry(entry))
    return 0


def cli_expand(path: str) -> int:
    """
    Expande um único diretório (sem recursão) e imprime seus filhos.
    Usa o mesmo LazyLoader da GUI, porém síncrono e sem atraso.
    """
    path = os.path.abspath(path)
    if not os.path.isdir(path):
        print(f"ERRO: '{path}' não é um diretório.", file=sys.stderr)
        return 2

    node = ConsoleNode(Entry(os.path.basename(path) or path, path, True))
    loader = LazyLoader(InlineDispatcher(), delay=0)
    loader.trigger_expand(node)

    print(f"{path}:")
    if not node.children:
        print("  (vazio)")
        return 0

    for child in node.children:
        print(f"  {_format_entry(child.content)}")
    print(f"\n{node.child_count:,} itens.")
    return 0
