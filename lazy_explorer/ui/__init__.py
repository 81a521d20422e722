from .app import LazyExplorerApp
from .frame import ExplorerFrame
from .tree_panel import ExplorerPanel, WxTreeNode
