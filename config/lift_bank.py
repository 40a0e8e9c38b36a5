"""
Lift Bank Configuration

Initial lift set and HTTP server settings for the dispatch service.
"""

from dataclasses import dataclass, field
from typing import List

from dispatcher.core.floors import is_valid_level


@dataclass
class LiftConfig:
    """Initial state of one lift"""
    id: int
    level: int

    def __post_init__(self):
        if not is_valid_level(self.level):
            raise ValueError(f"lift {self.id}: level {self.level} is not a valid floor")


def _default_lifts() -> List[LiftConfig]:
    return [
        LiftConfig(id=1, level=12),
        LiftConfig(id=2, level=-1),
        LiftConfig(id=3, level=5),
        LiftConfig(id=4, level=17),
    ]


@dataclass
class LiftBankConfig:
    """The fixed set of lifts created at startup"""
    lifts: List[LiftConfig] = field(default_factory=_default_lifts)

    def __post_init__(self):
        if not self.lifts:
            raise ValueError("lift_bank.lifts must contain at least one lift")
        ids = [lift.id for lift in self.lifts]
        if len(ids) != len(set(ids)):
            raise ValueError(f"lift ids must be unique, got {ids}")


@dataclass
class ServerConfig:
    """HTTP server settings"""
    host: str = "localhost"
    port: int = 3000
    debug: bool = False

    def __post_init__(self):
        if not (1 <= self.port <= 65535):
            raise ValueError(f"port must be between 1 and 65535, got {self.port}")


@dataclass
class DispatchConfig:
    """
    Complete service configuration

    Combines the initial lift bank and server settings.
    """
    lift_bank: LiftBankConfig = field(default_factory=LiftBankConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @classmethod
    def from_dict(cls, data: dict) -> 'DispatchConfig':
        """Create DispatchConfig from dictionary"""
        root = (data or {}).get('liftserver', data or {})

        bank_data = root.get('lift_bank', {})
        if 'lifts' in bank_data:
            lift_bank = LiftBankConfig(lifts=[
                LiftConfig(id=lift['id'], level=lift['level'])
                for lift in bank_data['lifts']
            ])
        else:
            lift_bank = LiftBankConfig()

        server_data = root.get('server', {})
        server = ServerConfig(
            host=server_data.get('host', 'localhost'),
            port=server_data.get('port', 3000),
            debug=server_data.get('debug', False)
        )

        return cls(lift_bank=lift_bank, server=server)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'liftserver': {
                'lift_bank': {
                    'lifts': [
                        {'id': lift.id, 'level': lift.level}
                        for lift in self.lift_bank.lifts
                    ]
                },
                'server': {
                    'host': self.server.host,
                    'port': self.server.port,
                    'debug': self.server.debug
                }
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        # Sections may have been edited after construction
        if not self.lift_bank.lifts:
            raise ValueError("lift_bank.lifts must contain at least one lift")
        seen = set()
        for lift in self.lift_bank.lifts:
            if lift.id in seen:
                raise ValueError(f"lift id {lift.id} is used more than once")
            seen.add(lift.id)
            if not is_valid_level(lift.level):
                raise ValueError(f"lift {lift.id}: level {lift.level} is not a valid floor")
