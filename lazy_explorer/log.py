import sys
import logging

LOGGER_NAME = "lazy_explorer"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Marca o handler instalado por nós, para não duplicar em chamadas repetidas
_HANDLER_TAG = "_lazy_explorer_handler"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """
    Configura o logger do pacote (stderr). Pode ser chamada mais de uma vez:
    apenas o nível é atualizado depois da primeira chamada.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(getattr(h, _HANDLER_TAG, False) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        setattr(handler, _HANDLER_TAG, True)
        logger.addHandler(handler)

    return logger
