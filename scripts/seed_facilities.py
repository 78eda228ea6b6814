import logging

from facility_directory.core.config import settings
from facility_directory.core.firebase import init_firebase

log = logging.getLogger(__name__)

facilities = [
    {
        "nome": "UBS Centro",
        "tipo_unidade": "UBS",
        "bairro": "Centro",
        "endereco": "Rua XV de Novembro, 100",
        "horario_funcionamento": "Seg a Sex, 07h às 19h",
        "telefone": "(41) 3350-1000",
        "servicos": ["Vacina", "Clínico Geral", "Curativos"],
    },
    {
        "nome": "UPA Norte",
        "tipo_unidade": "UPA",
        "bairro": "Zona Norte",
        "endereco": "Av. das Torres, 2500",
        "horario_funcionamento": "24 horas",
        "telefone": "(41) 3350-2000",
        "servicos": ["Raio-X", "Vacina", "Pronto Atendimento"],
    },
    {
        "nome": "UBS Vila Nova",
        "tipo_unidade": "UBS",
        "bairro": "Vila Nova",
        "servicos": ["Odontologia", "Pré-natal"],
    },
]


def seed(db, collection_name: str | None = None) -> list:
    """Add sample facilities, skipping names that already exist. Returns added names."""
    collection = db.collection(collection_name or settings.FACILITIES_COLLECTION)
    added = []
    for f in facilities:
        # Check if exists to avoid dupes
        exists = collection.where("nome", "==", f["nome"]).get()
        if not exists:
            collection.add(f)
            added.append(f["nome"])
            log.info("Added %s", f["nome"])
        else:
            log.info("Skipped %s (Exists)", f["nome"])
    return added


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s  %(message)s")
    seed(init_firebase())
