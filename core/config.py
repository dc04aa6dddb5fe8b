"""
Application configuration using Pydantic Settings
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings with environment variable support"""
    
    # DynamoDB
    DYNAMODB_TABLE: str = "CustomerData"
    
    # SNS (an empty topic ARN fails at publish time)
    SNS_TOPIC_ARN: str = ""
    
    # AWS
    AWS_REGION: Optional[str] = None
    
    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    
    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = Settings()
