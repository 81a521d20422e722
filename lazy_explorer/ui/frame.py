import wx
from typing import Optional, Sequence

from .tree_panel import ExplorerPanel


class ExplorerFrame(wx.Frame):
    def __init__(self, parent, title: str, delay: float, drives: Optional[Sequence[str]] = None):
        super().__init__(parent, title=title, size=(500, 700))
        self.CreateStatusBar(2)
        self.SetStatusWidths([-3, -1])
        self.SetStatusText("Expanda uma pasta para carregar seu conteúdo.", 0)
        self.SetStatusText(f"wxPython {wx.version()}", 1)

        self.explorer_panel = ExplorerPanel(self, self, delay=delay, drives=drives)

        # Painel ocupa toda a área cliente
        frame_sizer = wx.BoxSizer(wx.VERTICAL)
        frame_sizer.Add(self.explorer_panel, 1, wx.EXPAND)
        self.SetSizer(frame_sizer)
        self.SetMinSize((320, 400))
        self.CentreOnScreen()
        self.Show()
