import time
import enum
import logging
import threading
from typing import Any, Callable, Dict, List

from .entry import Entry
from .scanner import list_children

logger = logging.getLogger(__name__)

# Atraso artificial antes de anexar os filhos, para o indicador de carregamento ser visível
LOAD_DELAY_SECONDS = 1.0


class LoadState(enum.Enum):
    UNEXPANDED = "unexpanded"
    LOADING = "loading"
    POPULATED = "populated"


def can_expand(entry: Entry) -> bool:
    """Decide se o nó deve exibir o botão de expansão."""
    return bool(entry.has_children)


class LazyLoader:
    """
    Popula os filhos de um nó da árvore sob demanda (load on demand).

    O nó é qualquer objeto da camada de apresentação que exponha:
    `content` (Entry), `child_count`, `set_expanded(bool)`,
    `set_loading_indicator(bool)`, `attach_children(entries)` e `is_alive()`.

    A transição UNEXPANDED -> LOADING é feita sob lock, antes de despachar
    o trabalho, então dois pedidos quase simultâneos geram uma única listagem.
    """

    def __init__(self, dispatcher, delay: float = LOAD_DELAY_SECONDS,
                 lister: Callable[[str], List[Entry]] = list_children,
                 sleep: Callable[[float], Any] = time.sleep):
        self.dispatcher = dispatcher
        self.delay = max(0.0, delay)
        self._lister = lister
        self._sleep = sleep
        self._lock = threading.Lock()
        self._states: Dict[Any, LoadState] = {}

    def state(self, node) -> LoadState:
        with self._lock:
            return self._states.get(node, LoadState.UNEXPANDED)

    def pending_count(self) -> int:
        """Quantidade de nós em carregamento."""
        with self._lock:
            return sum(1 for s in self._states.values() if s is LoadState.LOADING)

    def forget(self, node) -> None:
        """Descarta o estado de um nó removido da árvore."""
        with self._lock:
            self._states.pop(node, None)

    def trigger_expand(self, node) -> bool:
        """
        Pedido de expansão vindo do usuário (chamado na thread da interface).
        Retorna True somente se uma nova listagem foi despachada.
        """
        with self._lock:
            state = self._states.get(node, LoadState.UNEXPANDED)
            if state is LoadState.LOADING:
                return False
            entry: Entry = node.content
            already_populated = state is LoadState.POPULATED or node.child_count > 0
            denied = not already_populated and not can_expand(entry)
            if already_populated or denied:
                self._states[node] = LoadState.POPULATED
            else:
                self._states[node] = LoadState.LOADING

        # Evita popular novamente a cada expansão
        if already_populated:
            node.set_expanded(True)
            return False

        # Sem filhos segundo a listagem original: termina vazio, sem ler o disco
        if denied:
            logger.debug("Expansão negada para nó sem filhos: %s", entry.full_path)
            return False

        # Indicador visível imediatamente, antes da listagem
        node.set_loading_indicator(True)
        self.dispatcher.run_in_background(self._load, node, entry)
        return True

    def _load(self, node, entry: Entry) -> None:
        """Roda fora da thread da interface."""
        entries: List[Entry] = []
        try:
            if self.delay > 0:
                self._sleep(self.delay)
            entries = self._lister(entry.full_path)
        except Exception:
            logger.exception("Falha inesperada ao listar %s", entry.full_path)
            entries = []
        logger.debug("%s: %d filhos", entry.full_path, len(entries))
        self.dispatcher.run_on_ui(self._finish, node, entries)

    def _finish(self, node, entries: List[Entry]) -> None:
        with self._lock:
            self._states[node] = LoadState.POPULATED

        if not node.is_alive():
            logger.debug("Nó removido durante o carregamento: %s", node.content.full_path)
            self.forget(node)
            return

        node.attach_children(entries)
        if entries:
            node.set_expanded(True)

        # Sempre encerra a animação, mesmo sem filhos
        node.set_loading_indicator(False)
