"""
The single persisted record type.

An Item holds one mutable timestamp. Its persistent identity is assigned by
the ModelContainer when the item is first inserted.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(eq=False)
class Item:
    timestamp: datetime
    # row id in the store, None until inserted
    persistent_id: Optional[int] = field(default=None, init=False, repr=False)

    @property
    def is_persisted(self) -> bool:
        return self.persistent_id is not None
