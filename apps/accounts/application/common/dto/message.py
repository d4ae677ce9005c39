"""Message DTO."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Message:
    """단순 결과 메시지.

    매 응답마다 새 id를 부여합니다.
    """

    message: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
