from pydantic_settings import BaseSettings, SettingsConfigDict

DECODE_MAX_DEPTH = 256
# each plutus level is two JSON levels, {"list": [...]} is an object then an array
DIFF_MAX_DEPTH = 2 * DECODE_MAX_DEPTH + 4


class Settings(BaseSettings):
    app_name: str = "cardano transaction decoder"

    # nesting ceilings, kept under the interpreter recursion limit
    diff_max_depth: int = DIFF_MAX_DEPTH
    decode_max_depth: int = DECODE_MAX_DEPTH

    model_config = SettingsConfigDict(env_file=".env")


settings = Settings()
