"""Extension of the pools configuration holding extra authorities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class PoolsConfigExtension:
    """Authorities for managing the config extension and token badges."""

    pools_config: bytes = bytes(32)
    config_extension_authority: bytes = bytes(32)
    token_badge_authority: bytes = bytes(32)

    LEN: ClassVar[int] = 8 + 32 + 32 + 32 + 512

    def initialize(self, pools_config: bytes, default_authority: bytes) -> None:
        self.pools_config = pools_config
        self.config_extension_authority = default_authority
        self.token_badge_authority = default_authority

    def update_config_extension_authority(self, config_extension_authority: bytes) -> None:
        self.config_extension_authority = config_extension_authority

    def update_token_badge_authority(self, token_badge_authority: bytes) -> None:
        self.token_badge_authority = token_badge_authority