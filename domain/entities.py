from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

@dataclass
class Task:
    title: str
    description: str = ""
    completed: bool = False
    id: Optional[int] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
