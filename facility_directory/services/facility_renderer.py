"""HTML rendering of facility cards and listing states.

Every value taken from a record goes through ``escape_text`` before it is
placed in markup, so a stored field can never inject tags into the page.
"""
from __future__ import annotations

import html
from typing import Sequence

from facility_directory.models.facility import FacilityRecord
from facility_directory.services.facility_filter import filter_facilities
from facility_directory.services.facility_state import FAILED, LOADING, FacilityState

NO_RESULTS_MESSAGE = "Nenhuma unidade encontrada com os critérios de busca."
LOAD_ERROR_MESSAGE = (
    "Erro ao conectar com o banco de dados. "
    "Verifique sua conexão ou a configuração do Firebase."
)
LOADING_MESSAGE = "Carregando unidades de saúde..."


def escape_text(value) -> str:
    return html.escape("" if value is None else str(value), quote=True)


def _alert(kind: str, message: str) -> str:
    return (
        '<div class="col-12">'
        f'<p class="alert alert-{kind} text-center">{escape_text(message)}</p>'
        "</div>"
    )


def render_card(record: FacilityRecord) -> str:
    services_html = "".join(
        f'<span class="badge bg-secondary badge-servico">{escape_text(s)}</span>'
        for s in record.services
    )
    return f"""
        <div class="col">
            <div class="card unidade-card shadow-sm" data-id="{escape_text(record.id)}">
                <div class="card-body">
                    <h5 class="card-title">{escape_text(record.name)}</h5>
                    <p class="card-text text-muted mb-1">{escape_text(record.unit_type)} - {escape_text(record.neighborhood)}</p>
                    <p class="card-text">
                        <i class="bi bi-geo-alt-fill me-1"></i> Endereço: {escape_text(record.display_address)}
                    </p>
                    <p class="card-text">
                        <i class="bi bi-clock me-1"></i> Horário: {escape_text(record.display_opening_hours)}
                    </p>
                    <p class="card-text">
                        <i class="bi bi-telephone me-1"></i> Contato: {escape_text(record.display_phone)}
                    </p>
                    <hr>
                    <h6>Serviços Oferecidos:</h6>
                    <div class="d-flex flex-wrap">{services_html}</div>
                </div>
            </div>
        </div>
    """


def render_listing(records: Sequence[FacilityRecord] | None) -> str:
    """Markup for the whole listing container (replaces prior content)."""
    if not records:
        return _alert("warning", NO_RESULTS_MESSAGE)
    return "".join(render_card(r) for r in records)


def render_loading() -> str:
    return _alert("info", LOADING_MESSAGE)


def render_load_error() -> str:
    return _alert("danger", LOAD_ERROR_MESSAGE)


def render_for_state(state: FacilityState, term: str | None = "") -> str:
    status, records = state.snapshot()
    if status == LOADING:
        return render_loading()
    if status == FAILED:
        return render_load_error()
    return render_listing(filter_facilities(records, term))
