"""Checklist model: ordered items with completion flags, editing and reordering. Pure logic, no UI."""

from dataclasses import dataclass
from mt.common.logger import log


@dataclass
class ChecklistItem:
    id: int
    description: str
    completed: bool = False


class Checklist:
    """Ordered list of ChecklistItem.

    Ids are handed out monotonically and never reused, so a row keeps its id
    through edits and moves. Operations on an unknown id are ignored.
    """

    def __init__(self):
        self.items = []
        self._next_id = 0

    def __len__(self):
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def get(self, item_id):
        return next((i for i in self.items if i.id == item_id), None)

    def index_of(self, item_id):
        return next((idx for idx, i in enumerate(self.items) if i.id == item_id), None)

    def add(self, description):
        text = description.strip()
        if not text:
            return None
        item = ChecklistItem(id=self._next_id, description=text)
        self._next_id += 1
        self.items.append(item)
        log.debug(f"Added checklist item {item.id} '{text}'")
        return item

    def remove(self, item_id):
        before = len(self.items)
        self.items = [i for i in self.items if i.id != item_id]
        if len(self.items) != before:
            log.debug(f"Removed checklist item {item_id}")

    def set_completed(self, item_id, completed):
        item = self.get(item_id)
        if item is not None:
            item.completed = bool(completed)

    def set_description(self, item_id, text):
        """Live edit; the text is stored as typed and only judged on commit."""
        item = self.get(item_id)
        if item is not None:
            item.description = text

    def commit_edit(self, item_id):
        """Finish editing an item. Blank items are dropped; returns True if so."""
        item = self.get(item_id)
        if item is None:
            return False
        if not item.description.strip():
            self.remove(item_id)
            return True
        return False

    def move(self, src_index, dst_index):
        if src_index == dst_index:
            return
        if not (0 <= src_index < len(self.items) and 0 <= dst_index < len(self.items)):
            return
        item = self.items.pop(src_index)
        self.items.insert(dst_index, item)
        log.debug(f"Moved checklist item {item.id} from {src_index} to {dst_index}")
