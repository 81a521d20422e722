import threading
from typing import Any, Callable


class InlineDispatcher:
    """Executa tudo na thread atual. Usado pelo modo CLI e pelos testes."""

    def run_in_background(self, func: Callable[..., Any], *args: Any) -> None:
        func(*args)

    def run_on_ui(self, func: Callable[..., Any], *args: Any) -> None:
        func(*args)


class ThreadDispatcher:
    """
    Executa o trabalho pesado em uma thread daemon e devolve o resultado
    para a thread da interface através de `call_after` (ex: wx.CallAfter).
    """

    def __init__(self, call_after: Callable[..., Any], name: str = "lazy-explorer-loader"):
        self.call_after = call_after
        self.name = name

    def run_in_background(self, func: Callable[..., Any], *args: Any) -> None:
        threading.Thread(target=func, args=args, name=self.name, daemon=True).start()

    def run_on_ui(self, func: Callable[..., Any], *args: Any) -> None:
        self.call_after(func, *args)
