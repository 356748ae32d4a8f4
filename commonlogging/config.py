# commonlogging/config.py
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"                 # threshold: DEBUG, INFO, WARN, ERROR
    LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s %(message)s"
    LOGGER_NAME: str = "commonlogging"      # stdlib logger the default sink writes to

    # MCP stdio transport
    MCP_SERVER_NAME: str = "CommonLogging"
    MCP_SERVER_VERSION: str = "0.1.0"

    class Config:
        env_file = ".env"
