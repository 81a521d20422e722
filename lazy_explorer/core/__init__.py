from .entry import Entry
from .scanner import list_children, has_any_child, list_drives, root_entries
from .dispatch import InlineDispatcher, ThreadDispatcher
from .loader import LazyLoader, LoadState, can_expand, LOAD_DELAY_SECONDS
