import os
from dotenv import load_dotenv

load_dotenv()


def _split_csv(value: str) -> list:
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings:
    # API Configuration
    API_TITLE = "HomeInOn Catalog API"
    API_DESCRIPTION = "Furniture catalog listing and natural-language category classification"
    API_VERSION = "1.0.0"

    # Server Configuration
    HOST = "0.0.0.0"
    PORT = int(os.getenv("PORT", "8080"))

    # Catalog Configuration
    ASSET_BASE_URL = os.getenv("ASSET_BASE_URL", "https://homeinon-backend.onrender.com")
    CATALOG_CSV_PATH = os.getenv("CATALOG_CSV_PATH", "products_clean.csv")
    CATALOG_CHUNK_SIZE = int(os.getenv("CATALOG_CHUNK_SIZE", "500"))

    # OpenAI Configuration
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", "0.3"))
    AI_MAX_TOKENS = int(os.getenv("AI_MAX_TOKENS", "300"))
    AI_TIMEOUT_SECONDS = float(os.getenv("AI_TIMEOUT_SECONDS", "10"))

    # CORS Configuration
    CORS_ORIGINS = _split_csv(
        os.getenv(
            "CORS_ORIGINS",
            "https://homeinon-frontend-static.onrender.com,http://localhost:3000",
        )
    )
    CORS_CREDENTIALS = True
    CORS_METHODS = ["GET", "POST"]
    CORS_HEADERS = ["Content-Type"]

settings = Settings()
