from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, ConfigDict, field_validator

from pdv.utils.config import setting
from pdv.utils.logs import get_logger

log = get_logger("pdv.sequence")


class SequenceKind(str, Enum):
    SALE = "sale"
    BUDGET = "budget"
    RECEIPT = "receipt"


def _default_prefix() -> str:
    return setting("PDV_SEQUENCE_PREFIX")


class SequentialConfig(BaseModel):
    """
    Numeração sequencial de vendas, orçamentos e recibos (ex.: PDV000001).
    Com `reset_daily`, os contadores voltam a 1 no primeiro uso de cada dia.
    Onde guardar (arquivo, banco) fica a cargo de quem usa: model_dump_json()/model_validate_json().
    """
    model_config = ConfigDict(validate_assignment=True)

    sale_number: int = Field(default=1, ge=1)
    budget_number: int = Field(default=1, ge=1)
    receipt_number: int = Field(default=1, ge=1)
    prefix: str = Field(default_factory=_default_prefix)
    reset_daily: bool = False
    last_reset: date = Field(default_factory=date.today)

    @field_validator("prefix", mode="before")
    @classmethod
    def _strip(cls, v: Any):
        if v is None:
            return ""
        return str(v).strip()

    # ---------------- Conveniências ----------------

    def _field(self, kind: SequenceKind | str) -> str:
        return f"{SequenceKind(kind).value}_number"

    def next_number(self, kind: SequenceKind | str) -> str:
        """Número formatado do próximo documento, sem avançar o contador."""
        pad = int(setting("PDV_SEQUENCE_PAD"))
        return f"{self.prefix}{getattr(self, self._field(kind)):0{pad}d}"

    def increment(self, kind: SequenceKind | str) -> None:
        name = self._field(kind)
        setattr(self, name, getattr(self, name) + 1)

    def reset(self, today: date | None = None) -> None:
        self.sale_number = 1
        self.budget_number = 1
        self.receipt_number = 1
        self.last_reset = today or date.today()

    def apply_daily_reset(self, today: date | None = None) -> bool:
        """Zera os contadores se `reset_daily` e o último reset foi em outro dia."""
        today = today or date.today()
        if not self.reset_daily or self.last_reset == today:
            return False
        log.info(f"Reset diário da numeração ({self.last_reset} -> {today})")
        self.reset(today)
        return True
