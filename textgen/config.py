from pydantic import Field
from pydantic_settings import BaseSettings
import os

class Settings(BaseSettings):
    fixed_seed: int = int(os.getenv("FIXED_SEED", 20))
    encoding: str = Field("utf-8", validation_alias="CORPUS_ENCODING")
    log_level: str = os.getenv("LOG_LEVEL", "WARNING")

settings = Settings()
