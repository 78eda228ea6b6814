"""Pydantic model for a health unit stored in Firestore.

Documents in the facilities collection use Portuguese keys (``nome``,
``bairro``, ``servicos``...). The model exposes them under English
attribute names and keeps the stored keys as aliases, so
``FacilityRecord.from_document(doc.id, doc.to_dict())`` accepts the raw
payload as-is.
"""
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

ADDRESS_FALLBACK = "Não informado"
HOURS_FALLBACK = "Verificar localmente"
PHONE_FALLBACK = "Sem telefone de contato"


class FacilityRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    id: str
    name: str = Field("", alias="nome")
    unit_type: str = Field("", alias="tipo_unidade")
    neighborhood: str = Field("", alias="bairro")

    # Optional descriptive fields (see display_* helpers for fallbacks)
    address: Optional[str] = Field(None, alias="endereco")
    opening_hours: Optional[str] = Field(None, alias="horario_funcionamento")
    phone: Optional[str] = Field(None, alias="telefone")

    services: Tuple[str, ...] = Field(default_factory=tuple, alias="servicos")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v):
        return "" if v is None else str(v)

    @field_validator("name", "unit_type", "neighborhood", mode="before")
    @classmethod
    def blank_if_missing(cls, v):
        if v is None:
            return ""
        return str(v)

    @field_validator("address", "opening_hours", "phone", mode="before")
    @classmethod
    def optional_text(cls, v):
        if v is None:
            return None
        return str(v)

    @field_validator("services", mode="before")
    @classmethod
    def validate_services(cls, v):
        # Anything that isn't a list/tuple means "no services"
        if not isinstance(v, (list, tuple)):
            return ()
        return tuple(str(s) for s in v if s is not None)

    @classmethod
    def from_document(cls, doc_id: str, data: Optional[Dict[str, Any]]) -> "FacilityRecord":
        """Merge a Firestore document id with its field payload."""
        return cls.model_validate({"id": doc_id, **(data or {})})

    @property
    def display_address(self) -> str:
        return self.address or ADDRESS_FALLBACK

    @property
    def display_opening_hours(self) -> str:
        return self.opening_hours or HOURS_FALLBACK

    @property
    def display_phone(self) -> str:
        return self.phone or PHONE_FALLBACK
