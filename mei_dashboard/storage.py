import logging
import time
from pathlib import Path
from uuid import UUID
from fastapi import Request

logger = logging.getLogger(__name__)


class LocalDocumentStore:
    """Armazenamento de notas fiscais e comprovantes em disco.

    Os arquivos são identificados só pelo caminho relativo
    ``{user_id}/{epoch_ms}.{ext}``; é esse caminho que vai para o lançamento.
    """

    def __init__(self, base_dir):
        self.base_dir = Path(base_dir).resolve()

    def build_path(self, user_id: UUID, filename: str) -> str:
        ext = filename.rsplit(".", 1)[-1].lower() if filename else "bin"
        return f"{user_id}/{int(time.time() * 1000)}.{ext}"

    def resolve(self, path: str) -> Path:
        full = (self.base_dir / path).resolve()
        if self.base_dir not in full.parents:
            raise FileNotFoundError(path)
        return full

    def save(self, user_id: UUID, filename: str, data: bytes) -> str:
        path = self.build_path(user_id, filename)
        full = self.resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)
        full.write_bytes(data)
        logger.info("Documento salvo em %s (%d bytes)", path, len(data))
        return path

    def open_path(self, path: str) -> Path:
        full = self.resolve(path)
        if not full.is_file():
            raise FileNotFoundError(path)
        return full


def get_document_store(request: Request) -> LocalDocumentStore:
    return request.app.state.documents
