import os
import string
import logging
from typing import List, Optional, Sequence

from .entry import Entry

logger = logging.getLogger(__name__)

# === FUNÇÕES AUXILIARES ===

def has_any_child(path: str) -> bool:
    """
    Verifica se o diretório possui ao menos uma subpasta ou arquivo.
    Não trata OSError: quem chama decide o que fazer com pastas inacessíveis.
    """
    with os.scandir(path) as it:
        return next(it, None) is not None


def _windows_drives() -> List[str]:
    """Letras de unidade existentes (ex: 'C:\\')."""
    listdrives = getattr(os, "listdrives", None)
    if listdrives is not None:
        return list(listdrives())
    return [f"{letter}:\\" for letter in string.ascii_uppercase if os.path.exists(f"{letter}:\\")]


def list_drives(drives: Optional[Sequence[str]] = None) -> List[str]:
    """
    Retorna os volumes disponíveis. No Windows, as letras de unidade;
    em sistemas POSIX, apenas a raiz '/'.
    Uma lista explícita (ex: --root na linha de comando) tem prioridade.
    """
    if drives:
        return list(drives)
    if os.name == 'nt':
        return _windows_drives()
    return [os.path.abspath(os.path.sep)]


def root_entries(drives: Optional[Sequence[str]] = None) -> List[Entry]:
    """Entradas raiz da árvore. Todo drive é marcado como expansível; o conteúdo só é lido na expansão."""
    return [Entry(name, name, True) for name in list_drives(drives)]

# ===============================================

def list_children(path: str) -> List[Entry]:
    """
    Lista os filhos imediatos de um diretório: primeiro as subpastas, depois os arquivos,
    na ordem devolvida pelo sistema operacional (sem ordenação).

    Subpastas cuja verificação de conteúdo falhar (permissão, I/O) são descartadas.
    Se o próprio diretório não puder ser lido, retorna lista vazia.
    """
    path = os.path.abspath(path)

    # 1. Enumeração do diretório
    try:
        with os.scandir(path) as it:
            items = list(it)
    except OSError as e:
        logger.warning("Não foi possível listar %s: %s", path, e)
        return []

    directories: List[Entry] = []
    files: List[Entry] = []

    # 2. Classifica e verifica se cada subpasta tem conteúdo
    for item in items:
        try:
            is_dir = item.is_dir()
        except OSError as e:
            logger.debug("Ignorando %s (tipo indeterminado): %s", item.path, e)
            continue

        if is_dir:
            try:
                has_children = has_any_child(item.path)
            except OSError as e:
                logger.debug("Ignorando pasta inacessível %s: %s", item.path, e)
                continue
            directories.append(Entry(item.name, item.path, has_children))
        else:
            files.append(Entry(item.name, item.path, False))

    return directories + files
