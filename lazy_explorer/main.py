import sys
import argparse
import logging
from typing import List, Optional

from .log import configure_logging
from .core import LOAD_DELAY_SECONDS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazy-explorer",
        description="Explorador de arquivos com carregamento sob demanda (lazy loading).",
    )
    parser.add_argument("path", nargs="?", help="Diretório a expandir no modo CLI.")
    parser.add_argument("--cli", action="store_true", help="Imprime no console em vez de abrir a janela.")
    parser.add_argument("--delay", type=float, default=LOAD_DELAY_SECONDS,
                        help=f"Atraso artificial (s) antes de exibir os filhos na GUI (padrão: {LOAD_DELAY_SECONDS}).")
    parser.add_argument("--root", action="append", dest="roots", metavar="NOME",
                        help="Raiz a exibir no lugar das unidades detectadas (pode repetir).")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log detalhado (DEBUG).")
    return parser


def run_gui(delay: float, drives: Optional[List[str]]) -> int:
    # Importado aqui para o modo CLI funcionar sem wxPython/display
    from .ui import LazyExplorerApp

    app = LazyExplorerApp(delay=delay, drives=drives)
    logger.info("Iniciando no Modo GUI...")
    app.MainLoop()
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    if args.delay < 0:
        print("ERRO: --delay não pode ser negativo.", file=sys.stderr)
        return 2

    if args.cli:
        from .cli import cli_expand, cli_list_roots
        if args.path:
            return cli_expand(args.path)
        return cli_list_roots(args.roots)

    return run_gui(args.delay, args.roots)


if __name__ == '__main__':
    sys.exit(main())
