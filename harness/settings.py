import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # Mock API (`harness serve`)
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3000"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Flow runner (`harness run`)
    HARNESS_BASE_URL: str = os.getenv("HARNESS_BASE_URL", "http://localhost:3000")
    # "monitor" shows everything; anything else is the redacted client view
    HARNESS_MODE: str = os.getenv("HARNESS_MODE", "client").lower()
    # 0 disables the timeout; a hung call then just delays the flow
    HARNESS_REQUEST_TIMEOUT_SEC: float = float(os.getenv("HARNESS_REQUEST_TIMEOUT_SEC", "0"))

    # Seeds the process-wide random source (ids + fault draws). Empty = OS entropy.
    HARNESS_RANDOM_SEED: str = os.getenv("HARNESS_RANDOM_SEED", "")

    ENABLE_PII_REDACTION: bool = os.getenv("ENABLE_PII_REDACTION", "true").lower() == "true"

settings = Settings()
