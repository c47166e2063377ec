from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings
from pydantic_settings import SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    model_config = SettingsConfigDict(env_prefix="CSVPIPE_", env_file_encoding="utf-8", env_nested_delimiter="__")


class LoggerSettings(BaseSettings):
    level: int = 20


class CsvSettings(BaseSettings):
    delimiter: str = ","
    enclosure: str = '"'

    @field_validator("delimiter", "enclosure")
    @classmethod
    def validate_single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError("must be exactly one character")
        return v


class WriterSettings(BaseSettings):
    overwrite: bool = False


class GlobalSettings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env")
    logger_settings: LoggerSettings = Field(default_factory=LoggerSettings)
    csv_settings: CsvSettings = Field(default_factory=CsvSettings)
    writer_settings: WriterSettings = Field(default_factory=WriterSettings)
