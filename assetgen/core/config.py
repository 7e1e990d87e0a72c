from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict

from assetgen.core.errors import GenericError

Domain = Literal["mainnets", "testnets"]

IBC_FOLDER_NAME = "_IBC"
ASSETLIST_FILE_NAME = "assetlist.json"
CHAIN_FILE_NAME = "chain.json"
ZONE_FILE_SUFFIX = ".zone.json"


class Settings(BaseSettings):
    # Environment mode: dev or prod
    ENV: Literal["dev", "prod"] = "dev"

    # Target chain (required by the CLI, may also be passed as arguments)
    CHAIN_NAME: str | None = None
    CHAIN_ID: str | None = None

    # Input/output roots
    CHAIN_REGISTRY_ROOT: str = "chain-registry"
    ASSETLISTS_ROOT: str = "."
    DOMAIN: Domain = "mainnets"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    SLACK_WEBHOOK_URL: str | None = None

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",  # ignore unrelated keys in local .env
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.ENV == "prod"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "dev"

    @property
    def effective_log_level(self) -> str:
        """Return appropriate log level based on environment."""
        if self.is_production:
            # In production, minimum INFO level (ignore DEBUG)
            return self.LOG_LEVEL if self.LOG_LEVEL.upper() != "DEBUG" else "INFO"
        return self.LOG_LEVEL


class GenerationConfig(BaseModel):
    """Everything a single generation run needs to know about where it works.

    Built once at the edge (CLI or test) and handed to every component, so no
    module reads the environment on its own.
    """

    model_config = ConfigDict(frozen=True)

    chain_name: str
    chain_id: str
    chain_registry_root: Path
    assetlists_root: Path
    domain: Domain = "mainnets"

    @classmethod
    def from_settings(
        cls,
        source: Settings,
        chain_name: Optional[str] = None,
        chain_id: Optional[str] = None,
    ) -> "GenerationConfig":
        name = chain_name or source.CHAIN_NAME
        ident = chain_id or source.CHAIN_ID
        if not name or not ident:
            raise GenericError("CHAIN_NAME and CHAIN_ID must both be set")
        return cls(
            chain_name=name,
            chain_id=ident,
            chain_registry_root=Path(source.CHAIN_REGISTRY_ROOT),
            assetlists_root=Path(source.ASSETLISTS_ROOT),
            domain=source.DOMAIN,
        )

    @property
    def registry_dir(self) -> Path:
        if self.domain == "testnets":
            return self.chain_registry_root / "testnets"
        return self.chain_registry_root

    @property
    def zone_dir(self) -> Path:
        if self.domain == "testnets":
            return self.assetlists_root / "testnets" / self.chain_id
        return self.assetlists_root / self.chain_id

    @property
    def zone_file(self) -> Path:
        return self.zone_dir / f"{self.chain_name}{ZONE_FILE_SUFFIX}"

    @property
    def output_file(self) -> Path:
        return self.zone_dir / f"{self.chain_id}.{ASSETLIST_FILE_NAME}"


settings = Settings()
