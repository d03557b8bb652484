import os
from decimal import Decimal
from dotenv import load_dotenv

load_dotenv()  # Carrega as variáveis do .env

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./mei_dashboard.db")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

SECRET_KEY = os.getenv("SECRET_KEY", "troque-esta-chave")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]

# Pasta onde ficam as notas fiscais e comprovantes enviados
DOCUMENTS_DIR = os.getenv("DOCUMENTS_DIR", "./notas-fiscais")

DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "America/Sao_Paulo")

# Valor padrão do DAS MEI (consulte o valor exato no PGMEI)
DAS_DEFAULT_AMOUNT = Decimal(os.getenv("DAS_DEFAULT_AMOUNT", "66.00"))
DAS_HISTORY_LIMIT = int(os.getenv("DAS_HISTORY_LIMIT", "12"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
