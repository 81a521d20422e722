from .interface import ConsoleNode, cli_expand, cli_list_roots
