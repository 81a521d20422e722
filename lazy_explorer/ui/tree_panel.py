import wx
import logging
from typing import Optional, Sequence, TYPE_CHECKING

from ..core import Entry, LazyLoader, LoadState, ThreadDispatcher, can_expand, root_entries

if TYPE_CHECKING:
    from .frame import ExplorerFrame

logger = logging.getLogger(__name__)

# Texto anexado ao rótulo do item enquanto os filhos são carregados
LOADING_SUFFIX = " (carregando...)"
PULSE_INTERVAL_MS = 100


class WxTreeNode:
    """Adapta um item do wx.TreeCtrl para a interface esperada pelo LazyLoader."""

    def __init__(self, panel: 'ExplorerPanel', item: wx.TreeItemId, entry: Entry):
        self.panel = panel
        self.item = item
        self.content = entry
        self.alive = True

    @property
    def child_count(self) -> int:
        return self.panel.tree_ctrl.GetChildrenCount(self.item, recursively=False)

    def set_expanded(self, expanded: bool):
        tree = self.panel.tree_ctrl
        if expanded and not tree.IsExpanded(self.item):
            tree.Expand(self.item)
        elif not expanded and tree.IsExpanded(self.item):
            tree.Collapse(self.item)

    def set_loading_indicator(self, loading: bool):
        label = self.content.name + (LOADING_SUFFIX if loading else "")
        self.panel.tree_ctrl.SetItemText(self.item, label)
        self.panel.on_loading_changed()

    def attach_children(self, entries: Sequence[Entry]):
        tree = self.panel.tree_ctrl
        tree.Freeze()
        try:
            for entry in entries:
                self.panel.append_entry(self.item, entry)
        finally:
            tree.Thaw()

        # Flag has_children desatualizado: remove o botão de expansão
        if not entries:
            tree.SetItemHasChildren(self.item, False)

    def is_alive(self) -> bool:
        return self.alive


class ExplorerPanel(wx.Panel):
    """Painel com a árvore de drives/pastas/arquivos carregada sob demanda."""

    def __init__(self, parent: wx.Window, frame: 'ExplorerFrame', delay: float,
                 drives: Optional[Sequence[str]] = None):
        super().__init__(parent)
        self.frame = frame
        self.drives = drives
        self.loader = LazyLoader(ThreadDispatcher(wx.CallAfter), delay=delay)
        self.pulse_timer = wx.Timer(self)

        self._setup_ui()
        self._setup_bindings()
        self.load_roots()

    def _setup_ui(self):
        sizer = wx.BoxSizer(wx.VERTICAL)

        btn_sizer = wx.BoxSizer(wx.HORIZONTAL)
        self.btn_reload = wx.Button(self, label="Recarregar")
        self.btn_collapse = wx.Button(self, label="Recolher Tudo")
        btn_sizer.Add(self.btn_reload, 0, wx.RIGHT, 2)
        btn_sizer.Add(self.btn_collapse, 0)
        sizer.Add(btn_sizer, 0, wx.EXPAND | wx.ALL, 5)

        self.tree_ctrl = wx.TreeCtrl(self, style=wx.TR_DEFAULT_STYLE | wx.TR_HAS_BUTTONS | wx.TR_LINES_AT_ROOT | wx.TR_HIDE_ROOT)
        self.tree_ctrl.SetBackgroundColour(wx.Colour(30, 30, 30))
        self.tree_ctrl.SetForegroundColour(wx.Colour(220, 220, 220))
        sizer.Add(self.tree_ctrl, 1, wx.EXPAND | wx.LEFT | wx.RIGHT, 5)

        # Status
        self.progress_bar = wx.Gauge(self, range=100, style=wx.GA_HORIZONTAL)
        sizer.Add(self.progress_bar, 0, wx.EXPAND | wx.LEFT | wx.RIGHT, 5)
        self.status_text = wx.StaticText(self, label="Pronto.")
        sizer.Add(self.status_text, 0, wx.EXPAND | wx.ALL, 5)

        self.SetSizer(sizer)

    def _setup_bindings(self):
        self.btn_reload.Bind(wx.EVT_BUTTON, self.on_reload)
        self.btn_collapse.Bind(wx.EVT_BUTTON, self.on_collapse_all)

        self.tree_ctrl.Bind(wx.EVT_TREE_ITEM_EXPANDING, self.on_item_expanding)
        self.tree_ctrl.Bind(wx.EVT_TREE_DELETE_ITEM, self.on_item_deleted)
        self.tree_ctrl.Bind(wx.EVT_TREE_SEL_CHANGED, self.on_tree_selection_changed)
        self.Bind(wx.EVT_TIMER, self._on_pulse, self.pulse_timer)

    # --- Construção da Árvore ---

    def load_roots(self):
        """(Re)constrói a árvore apenas com as unidades; nada abaixo delas é lido ainda."""
        self.tree_ctrl.DeleteAllItems()
        root_item = self.tree_ctrl.AddRoot("Computador")

        entries = root_entries(self.drives)
        for entry in entries:
            self.append_entry(root_item, entry)

        logger.info("%d unidade(s) carregada(s): %s", len(entries), ", ".join(e.name for e in entries))
        self.on_loading_changed()

    def append_entry(self, parent_item: wx.TreeItemId, entry: Entry) -> wx.TreeItemId:
        item = self.tree_ctrl.AppendItem(parent_item, entry.name)
        self.tree_ctrl.SetItemData(item, WxTreeNode(self, item, entry))
        self.tree_ctrl.SetItemHasChildren(item, can_expand(entry))
        return item

    # --- Eventos ---

    def on_item_expanding(self, event: wx.TreeEvent):
        """
        Expansão pedida pelo usuário. Nós já populados abrem normalmente;
        os demais são vetados aqui e abertos pelo LazyLoader quando a listagem terminar.
        """
        node = self.tree_ctrl.GetItemData(event.GetItem())
        if node is None or self.loader.state(node) is LoadState.POPULATED:
            event.Skip()
            return

        event.Veto()
        self.loader.trigger_expand(node)

    def on_item_deleted(self, event: wx.TreeEvent):
        """Marca o nó como removido para descartar listagens que ainda estão em andamento."""
        item = event.GetItem()
        node = self.tree_ctrl.GetItemData(item) if item.IsOk() else None
        if node is not None:
            node.alive = False
            self.loader.forget(node)
        event.Skip()

    def on_tree_selection_changed(self, event: wx.TreeEvent):
        item = event.GetItem()
        if item.IsOk():
            node = self.tree_ctrl.GetItemData(item)
            if node is not None:
                self.frame.SetStatusText(node.content.full_path, 0)

    def on_reload(self, event):
        self.load_roots()

    def on_collapse_all(self, event):
        root_item = self.tree_ctrl.GetRootItem()
        if root_item.IsOk():
            child, cookie = self.tree_ctrl.GetFirstChild(root_item)
            while child.IsOk():
                self.tree_ctrl.CollapseAllChildren(child)
                child, cookie = self.tree_ctrl.GetNextChild(root_item, cookie)

    # --- Indicador de Carregamento ---

    def on_loading_changed(self):
        """Atualiza barra de progresso e status conforme a quantidade de cargas pendentes."""
        pending = self.loader.pending_count()
        if pending:
            self.status_text.SetLabel(f"Carregando {pending} pasta(s)...")
            if not self.pulse_timer.IsRunning():
                self.pulse_timer.Start(PULSE_INTERVAL_MS)
        else:
            self.pulse_timer.Stop()
            self.progress_bar.SetValue(0)
            self.status_text.SetLabel("Pronto.")

    def _on_pulse(self, event):
        self.progress_bar.Pulse()
