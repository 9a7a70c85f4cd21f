from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class Settings_provider(ABC):
    @abstractmethod
    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        pass

    @abstractmethod
    def get_int(self, key: str, default: Optional[int] = None) -> Optional[int]:
        pass

    @abstractmethod
    def get_float(self, key: str, default: Optional[float] = None) -> Optional[float]:
        pass

    @abstractmethod
    def get_bool(self, key: str, default: bool = False) -> bool:
        pass

    @abstractmethod
    def snapshot(self) -> Dict[str, Any]:
        """Return the known configuration keys with their current values."""
        pass
