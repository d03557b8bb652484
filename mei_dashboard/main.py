import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from mei_dashboard.api import auth, categories, das, dashboard, documents, links, profile, recurring_debts, transactions
from mei_dashboard.core.config import CORS_ORIGINS, DOCUMENTS_DIR, LOG_LEVEL
from mei_dashboard.database import build_engine, create_db_and_tables
from mei_dashboard.storage import LocalDocumentStore

logger = logging.getLogger(__name__)


def create_app(database_url: Optional[str] = None, documents_dir: Optional[str] = None) -> FastAPI:
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = build_engine(database_url)
    document_store = LocalDocumentStore(documents_dir or DOCUMENTS_DIR)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        create_db_and_tables(engine)
        yield
        engine.dispose()

    app = FastAPI(title="Painel MEI", lifespan=lifespan)
    app.state.engine = engine
    app.state.documents = document_store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        # Sem retentativa: o cliente mostra o aviso e mantém o último estado
        logger.error("Falha no banco em %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=503,
            content={"detail": "Erro ao acessar o banco de dados. Tente novamente."},
        )

    app.include_router(auth.router)
    app.include_router(profile.router)
    app.include_router(transactions.router)
    app.include_router(documents.router)
    app.include_router(recurring_debts.router)
    app.include_router(das.router)
    app.include_router(dashboard.router)
    app.include_router(categories.router)
    app.include_router(links.router)

    @app.get("/")
    def root():
        return {"message": "Painel financeiro MEI"}

    return app


app = create_app()
