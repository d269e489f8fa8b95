"""playground_providers.config.defaults
===================================

Central place for small, stable default values used across the clients, the
playground router, the service layer and the CLI.

This module intentionally avoids importing from other packages to prevent
circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Service / HTTP layer ----

# Comma-separated list of allowed origins for the FastAPI service.
PLAYGROUND_SERVICE_CORS_DEFAULT_ORIGINS = "http://localhost:3000,http://127.0.0.1:3000"
PLAYGROUND_SERVICE_DEFAULT_HOST = "127.0.0.1"
PLAYGROUND_SERVICE_DEFAULT_PORT = 8000


# ---- CLI defaults ----
PLAYGROUND_CLI_DEFAULT_PROVIDER = "Demo"
PLAYGROUND_CLI_DEFAULT_MODEL = "demo-model"


# ---- Generation defaults ----
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1024
# Tokens requested by test_connection() probes.
CONNECTION_TEST_MAX_TOKENS = 10


# ---- Playground router ----
DEMO_RESPONSE_DELAY_SECONDS = 1.0
CONFIDENCE_FLOOR = 0.92
CONFIDENCE_SPAN = 0.08
CHARS_PER_TOKEN = 4


# ---- Cached playground wrapper ----
PLAYGROUND_CACHE_TTL_SECONDS = 30
FINGERPRINT_INPUT_PREFIX = 100


# ---- Provider-specific defaults ----
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
OPENAI_DEFAULT_MODEL = "gpt-3.5-turbo"
OPENAI_DEFAULT_SYSTEM_PROMPT = "You are a helpful assistant."
OPENAI_DEFAULT_MAX_TOKENS = 1000
OPENAI_DEFAULT_EMBEDDING_MODEL = "text-embedding-ada-002"

ANTHROPIC_DEFAULT_BASE_URL = "https://api.anthropic.com/v1"
ANTHROPIC_API_VERSION = "2023-06-01"
ANTHROPIC_DEFAULT_MODEL = "claude-3-sonnet-20240229"
ANTHROPIC_CONNECTION_TEST_MODEL = "claude-3-haiku-20240307"

DEEPSEEK_DEFAULT_BASE_URL = "https://api.deepseek.com/v1"
DEEPSEEK_DEFAULT_MODEL = "deepseek-chat"

PERPLEXITY_DEFAULT_BASE_URL = "https://api.perplexity.ai"
PERPLEXITY_DEFAULT_MODEL = "llama-3-70b-instruct"
PERPLEXITY_DEFAULT_SONAR_MODEL = "sonar-medium-online"
PERPLEXITY_CONNECTION_TEST_MODEL = "mistral-7b-instruct"

NEWS_DEFAULT_BASE_URL = "https://newsapi.org/v2"
WEATHER_DEFAULT_BASE_URL = "https://api.open-meteo.com/v1"


__all__ = [
    # Service
    "PLAYGROUND_SERVICE_CORS_DEFAULT_ORIGINS",
    "PLAYGROUND_SERVICE_DEFAULT_HOST",
    "PLAYGROUND_SERVICE_DEFAULT_PORT",
    # CLI
    "PLAYGROUND_CLI_DEFAULT_PROVIDER",
    "PLAYGROUND_CLI_DEFAULT_MODEL",
    # Generation
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "CONNECTION_TEST_MAX_TOKENS",
    # Router
    "DEMO_RESPONSE_DELAY_SECONDS",
    "CONFIDENCE_FLOOR",
    "CONFIDENCE_SPAN",
    "CHARS_PER_TOKEN",
    # Cache
    "PLAYGROUND_CACHE_TTL_SECONDS",
    "FINGERPRINT_INPUT_PREFIX",
    # Providers
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_SYSTEM_PROMPT",
    "OPENAI_DEFAULT_MAX_TOKENS",
    "OPENAI_DEFAULT_EMBEDDING_MODEL",
    "ANTHROPIC_DEFAULT_BASE_URL",
    "ANTHROPIC_API_VERSION",
    "ANTHROPIC_DEFAULT_MODEL",
    "ANTHROPIC_CONNECTION_TEST_MODEL",
    "DEEPSEEK_DEFAULT_BASE_URL",
    "DEEPSEEK_DEFAULT_MODEL",
    "PERPLEXITY_DEFAULT_BASE_URL",
    "PERPLEXITY_DEFAULT_MODEL",
    "PERPLEXITY_DEFAULT_SONAR_MODEL",
    "PERPLEXITY_CONNECTION_TEST_MODEL",
    "NEWS_DEFAULT_BASE_URL",
    "WEATHER_DEFAULT_BASE_URL",
]
