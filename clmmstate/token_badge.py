"""Token badges mark mints that a config allows despite restricted features."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class TokenBadge:
    """Approval of one token mint under one pools config."""

    pools_config: bytes = bytes(32)
    token_mint: bytes = bytes(32)

    LEN: ClassVar[int] = 8 + 32 + 32 + 128

    def initialize(self, pools_config: bytes, token_mint: bytes) -> None:
        self.pools_config = pools_config
        self.token_mint = token_mint