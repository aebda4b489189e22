from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fluenthttp.app.constants import MAX_REDIRECTIONS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", populate_by_name=True)

    max_redirections: int = Field(MAX_REDIRECTIONS, ge=0, validation_alias="FLUENTHTTP_MAX_REDIRECTIONS")

    # Empty means httpx's own agent and nothing carried over on redirect hops.
    user_agent: str = Field("", validation_alias="FLUENTHTTP_USER_AGENT")
    verbose: bool = Field(False, validation_alias="FLUENTHTTP_VERBOSE")

    log_level: str = Field("INFO", validation_alias="FLUENTHTTP_LOG_LEVEL")
