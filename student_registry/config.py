import os
from dataclasses import dataclass

# The service always listens here, there is no override.
PORT = 3000


@dataclass
class Settings:
    host: str = os.getenv("STUDENT_REGISTRY_HOST", "0.0.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    port: int = PORT


settings = Settings()
