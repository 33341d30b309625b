from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    APP_NAME: str = "AviaryGenealogyAPI"
    APP_ENV: str = "dev"
    APP_HOST: str = "0.0.0.0"
    APP_PORT: int = 8000
    LOG_LEVEL: str = "info"

    APP_CORS_ORIGINS: str = "http://localhost:3000"
    @property
    def CORS_ORIGINS(self) -> List[str]:
        return [o.strip() for o in self.APP_CORS_ORIGINS.split(",") if o.strip()]

    # JWT (tokens are issued by the auth service, we only verify them)
    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"

    # Mongo (species directory)
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB: str = "aviary"

    # Neo4j (individual records)
    NEO4J_URI: str = "neo4j://localhost:7687"
    NEO4J_USER: str = "neo4j"
    NEO4J_PASSWORD: str = "neo4j"

    # Genealogy engine bounds
    PEDIGREE_GENERATIONS: int = 5
    INBREEDING_MAX_DEPTH: int = 10

settings = Settings()
