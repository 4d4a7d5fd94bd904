"""Active configuration model for gcpctl"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


# gcloud prints "None" for unset properties; the same string marks unknown fields here
UNSET = "None"


@dataclass
class ActiveConfigurationState:
    """The configuration gcloud currently applies by default"""

    config_name: str = UNSET
    project_id: str = UNSET
    account: str = UNSET
    region: str = UNSET

    @property
    def is_set(self) -> bool:
        """Check if any configuration has been resolved"""
        return self.config_name != UNSET

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'config_name': self.config_name,
            'project_id': self.project_id,
            'account': self.account,
            'region': self.region,
        }

    @classmethod
    def from_gcloud(cls, data: Optional[Dict[str, Any]]) -> 'ActiveConfigurationState':
        """Create state from one element of `config configurations list` JSON.

        Missing fields map to the "None" sentinel.
        """
        data = data or {}
        properties = data.get('properties') or {}
        core = properties.get('core') or {}
        compute = properties.get('compute') or {}

        return cls(
            config_name=_field(data.get('name')),
            project_id=_field(core.get('project')),
            account=_field(core.get('account')),
            region=_field(compute.get('region')),
        )

    def update(self, other: 'ActiveConfigurationState') -> None:
        """Overwrite all fields in place"""
        self.config_name = other.config_name
        self.project_id = other.project_id
        self.account = other.account
        self.region = other.region

    def reset(self) -> None:
        """Return every field to the sentinel"""
        self.update(ActiveConfigurationState())


def _field(value: Any) -> str:
    if value is None or value == "":
        return UNSET
    return str(value)
