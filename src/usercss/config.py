from __future__ import annotations

from dataclasses import dataclass

from usercss import __version__


@dataclass(frozen=True)
class UserCSSConfig:
    timeout: float = 10.0  # seconds, applied to connect and read
    user_agent: str = f"usercss/{__version__}"
    follow_redirects: bool = True
