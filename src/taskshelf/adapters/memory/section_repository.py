"""In-memory implementation of SectionRepository."""

from __future__ import annotations

import logging
import threading

from taskshelf.adapters.memory.notifier import ChangeNotifier
from taskshelf.adapters.memory.utils import find_index, generate_uuid
from taskshelf.models import (
    INBOX_SECTION_ID,
    INBOX_SECTION_TITLE,
    NotFoundError,
    Section,
    SectionCreate,
    SectionUpdate,
)
from taskshelf.repositories import Listener, SectionRepository

logger = logging.getLogger(__name__)


class MemorySectionRepository(SectionRepository):
    """Section store backed by a list kept in creation order.

    The inbox section is created here and can be renamed but never removed.
    """

    def __init__(
        self,
        default_title: str = INBOX_SECTION_TITLE,
        lock: threading.RLock | None = None,
    ):
        """Initialize the section store.

        Args:
            default_title: Title given to the inbox section
            lock: Optional lock shared with other stores. If None, the store
                creates its own.
        """
        self._lock = lock or threading.RLock()
        self._sections: list[Section] = [
            Section(id=INBOX_SECTION_ID, title=default_title)
        ]
        self._notifier = ChangeNotifier()

    def subscribe(self, listener: Listener) -> None:
        self._notifier.subscribe(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._notifier.unsubscribe(listener)

    def list_all(self) -> list[Section]:
        with self._lock:
            return list(self._sections)

    def get(self, section_id: str) -> Section:
        with self._lock:
            index = find_index(self._sections, section_id)
            if index is None:
                raise NotFoundError("section", section_id)
            return self._sections[index]

    def add(self, section_data: SectionCreate) -> Section:
        with self._lock:
            section = Section(id=generate_uuid(), title=section_data.title)
            self._sections.append(section)
            logger.debug("Section added id=%s title=%r", section.id, section.title)
            self._notifier.notify()
            return section

    def update(self, section_id: str, updates: SectionUpdate) -> Section:
        with self._lock:
            index = find_index(self._sections, section_id)
            if index is None:
                raise NotFoundError("section", section_id)
            section = self._sections[index].model_copy(update={"title": updates.title})
            self._sections[index] = section
            logger.debug("Section renamed id=%s title=%r", section_id, updates.title)
            self._notifier.notify()
            return section

    def delete(self, section_id: str) -> bool:
        if section_id == INBOX_SECTION_ID:
            logger.debug("Refusing to delete the inbox section")
            return False

        with self._lock:
            index = find_index(self._sections, section_id)
            if index is None:
                return False
            del self._sections[index]
            logger.debug("Section deleted id=%s", section_id)
            self._notifier.notify()
            return True
