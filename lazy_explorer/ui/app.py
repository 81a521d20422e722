import wx
import logging
from typing import Optional, Sequence

from ..core import LOAD_DELAY_SECONDS
from .frame import ExplorerFrame

logger = logging.getLogger(__name__)


class LazyExplorerApp(wx.App):
    """Abre a janela do explorador com as unidades como únicos itens carregados."""
    def __init__(self, delay: float = LOAD_DELAY_SECONDS, drives: Optional[Sequence[str]] = None):
        # wx.App.__init__ chama OnInit, então os parâmetros precisam existir antes
        self.delay = delay
        self.drives = drives
        super().__init__(False)

    def OnInit(self) -> bool:
        logger.info("Ambiente da GUI: wxpython_version=%s", wx.version())

        frame = ExplorerFrame(None, "Lazy Explorer - Carregamento Sob Demanda", delay=self.delay, drives=self.drives)
        self.SetTopWindow(frame)
        return True
