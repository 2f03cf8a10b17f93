from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentRef:
    """Identifies one environment (dev, test, live, a multidev) of a site."""

    site_id: str
    environment_id: str

    @property
    def api_path(self) -> str:
        return f"sites/{self.site_id}/environments/{self.environment_id}"
