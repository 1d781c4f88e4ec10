# minicommerce/domain/status.py
from enum import Enum


class OrderStatus(str, Enum):
    """
    Prosta maszyna stanow zamowienia:
    CREATED -> PAID albo CREATED -> CANCELLED, oba stany koncowe.
    """

    CREATED = "CREATED"
    PAID = "PAID"
    CANCELLED = "CANCELLED"

    @classmethod
    def parse(cls, raw: str) -> "OrderStatus":
        return cls(raw.strip().upper())

    @property
    def is_terminal(self) -> bool:
        return self is not OrderStatus.CREATED

    def can_transition_to(self, target: "OrderStatus") -> bool:
        return self is OrderStatus.CREATED and target.is_terminal

    @classmethod
    def allowed(cls) -> str:
        return ", ".join(s.value for s in cls)
