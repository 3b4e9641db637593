"""Runtime configuration for the pattern matcher tools."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="MC_PATTERNS_", env_file=".env", extra="ignore")

    app_name: str = "mc-patterns"
    log_level: str = "INFO"
    world_adapter: str = Field(
        default="memory",
        description="World backend: 'memory' (in-process grid) or 'minescript' (live game).",
    )
    minescript_command_prefix: str = "/"
    trigger_block: str = "minecraft:diamond_block"
    spawn_entity: str = "minecraft:cow"
    destroy_on_match: bool = True
    pattern_file: str | None = Field(
        default=None,
        description="JSON pattern file used instead of the built-in T pattern.",
    )


settings = Settings()
