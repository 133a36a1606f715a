from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

# The service always listens here; there is no flag or env override.
PORT = 8080


class Settings(BaseSettings):
    APP_NAME: str = "Receipt Points Service"
    HOST: str = "0.0.0.0"
    LOG_LEVEL: str = "INFO"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # Defaults and explicit kwargs only; environment and .env are ignored
        return (init_settings,)

settings = Settings()
