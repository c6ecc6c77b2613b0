"""
Configuration management for the TrialEligibility demo service
"""

import os
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

class Config:
    """Configuration class for managing all project settings"""

    # Reasoning backend (optional). Absence of the key disables LLM reasoning.
    OPENAI_API_KEY: Optional[str] = os.getenv('OPENAI_API_KEY') or None
    LLM_MODEL: str = os.getenv('LLM_MODEL', 'gpt-3.5-turbo')
    LLM_MAX_TOKENS: int = int(os.getenv('LLM_MAX_TOKENS', '200'))

    # ClinicalTrials.gov registry
    CTGOV_API_BASE: str = os.getenv('CTGOV_API_BASE', 'https://clinicaltrials.gov/api/v2').rstrip('/')
    CTGOV_PAGE_SIZE: int = int(os.getenv('CTGOV_PAGE_SIZE', '10'))
    DEFAULT_CONDITION: str = os.getenv('DEFAULT_CONDITION', 'diabetes')
    SEARCH_TIMEOUT: int = int(os.getenv('SEARCH_TIMEOUT', '30'))

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FORMAT: str = os.getenv('LOG_FORMAT', '%(asctime)s - %(levelname)s - %(message)s')
    LOG_TO_FILE: bool = os.getenv('LOG_TO_FILE', 'true').lower() == 'true'
    LOG_TO_CONSOLE: bool = os.getenv('LOG_TO_CONSOLE', 'true').lower() == 'true'
    LOG_DIRECTORY: str = os.getenv('LOG_DIRECTORY', 'logs')

    @classmethod
    def get_log_level(cls) -> int:
        """Get logging level as integer"""
        import logging
        level_map = {
            'DEBUG': logging.DEBUG,
            'INFO': logging.INFO,
            'WARNING': logging.WARNING,
            'ERROR': logging.ERROR,
            'CRITICAL': logging.CRITICAL
        }
        return level_map.get(cls.LOG_LEVEL.upper(), logging.INFO)

    @classmethod
    def reasoning_enabled(cls) -> bool:
        return bool(cls.OPENAI_API_KEY)

    @classmethod
    def validate_config(cls) -> List[str]:
        """Validate configuration settings; returns the list of problems found"""
        errors = []

        if not cls.CTGOV_API_BASE.startswith(('http://', 'https://')):
            errors.append("CTGOV_API_BASE must be an http(s) URL")
        if cls.CTGOV_PAGE_SIZE <= 0:
            errors.append("CTGOV_PAGE_SIZE must be positive")
        if cls.SEARCH_TIMEOUT <= 0:
            errors.append("SEARCH_TIMEOUT must be positive")
        if cls.LLM_MAX_TOKENS <= 0:
            errors.append("LLM_MAX_TOKENS must be positive")
        if not cls.DEFAULT_CONDITION.strip():
            errors.append("DEFAULT_CONDITION must not be empty")

        # Validate log level
        if cls.LOG_LEVEL.upper() not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            errors.append("LOG_LEVEL must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")

        if errors:
            print("Configuration errors:")
            for error in errors:
                print(f"  - {error}")

        return errors


# Global configuration instance
config = Config()
