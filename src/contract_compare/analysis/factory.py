"""Construction of the configured clause analyzer."""

import logging
from typing import Optional

from ..config.models import AnalysisConfig
from ..interfaces.analyzer import IClauseAnalyzer
from .mistral_analyzer import MistralClauseAnalyzer
from .openai_analyzer import OpenAIClauseAnalyzer


logger = logging.getLogger(__name__)

SUPPORTED_PROVIDERS = ("openai", "mistral")


def create_analyzer(config: Optional[AnalysisConfig] = None) -> Optional[IClauseAnalyzer]:
    """
    Create the analyzer selected by ``config``.

    Args:
        config: Analysis settings; read from the environment if None.

    Returns:
        The configured analyzer, or None when no provider is selected or
        its credentials are missing.
    """
    config = config or AnalysisConfig.from_env()
    provider = config.provider

    if not provider:
        logger.info("No analysis provider configured, using templated analysis")
        return None

    if provider not in SUPPORTED_PROVIDERS:
        logger.warning(
            f"Unknown analysis provider '{provider}', expected one of {SUPPORTED_PROVIDERS}"
        )
        return None

    if provider == "openai":
        if not config.openai_api_key:
            logger.warning("OPENAI_API_KEY not set, using templated analysis")
            return None
        return OpenAIClauseAnalyzer(
            api_key=config.openai_api_key,
            model=config.openai_model,
            timeout=config.request_timeout,
        )

    if not config.mistral_api_key or not config.mistral_api_url:
        logger.warning("MISTRAL_API_KEY or MISTRAL_API_URL not set, using templated analysis")
        return None
    return MistralClauseAnalyzer(
        api_url=config.mistral_api_url,
        api_key=config.mistral_api_key,
        model=config.mistral_model,
        timeout=config.request_timeout,
    )
