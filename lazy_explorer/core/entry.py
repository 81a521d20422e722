from typing import NamedTuple


class Entry(NamedTuple):
    """Representa um item do sistema de arquivos exibido na árvore (drive, pasta ou arquivo)."""

    name: str
    # Caminho absoluto (chave única dentro da raiz)
    full_path: str
    # Calculado uma única vez na listagem; pode ficar desatualizado
    has_children: bool = False

    def __repr__(self) -> str:
        return f"Entry(name='{self.name}', path='{self.full_path}', children={self.has_children})"
