from pydantic_settings import BaseSettings

from ..core.prompts import DEFAULT_SYSTEM_PROMPT


class Settings(BaseSettings):

    ollama_base_url: str = "http://127.0.0.1:11434"
    llm_model: str = "tinyllama"

    # Prepended to every prompt; set to "" to send the conversation only
    system_prompt: str = DEFAULT_SYSTEM_PROMPT

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
