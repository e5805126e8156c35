"""
Gemini transport client.

Wraps a single-turn ``generate_content`` call with named sampling
profiles and fixed content-safety settings, and translates SDK failures
into the package's error types.
"""
import logging
import os
from typing import Any, Dict, Optional

from google import genai
from google.genai import errors, types
from pydantic import BaseModel, ConfigDict, Field

from assessment_ai import config
from assessment_ai.errors import (
    ConfigurationError,
    MalformedResponseError,
    UpstreamError,
)
from assessment_ai.models.profile_models import GenerationProfile
from assessment_ai.utils.env_loader import load_env

logger = logging.getLogger(__name__)


class GeminiSettings(BaseModel):
    """Explicit configuration for the transport client."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    api_key: Optional[str] = Field(
        default=None, description="Google AI API key")
    model_name: str = Field(
        default=config.MODEL_NAME, description="Gemini model to call")
    profiles: Dict[str, GenerationProfile] = Field(
        default_factory=lambda: dict(config.GENERATION_PROFILES),
        description="Generation profiles keyed by call purpose")
    retry_count: int = Field(default=config.RETRY_COUNT, ge=0)
    retry_initial_delay: float = Field(
        default=config.RETRY_INITIAL_DELAY_SECONDS, ge=0.0)

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls, **overrides: Any) -> "GeminiSettings":
        """
        Build settings from the environment, loading .env first.

        Args:
            **overrides: Field values that take precedence over the environment

        Returns:
            GeminiSettings instance
        """
        load_env()
        values: Dict[str, Any] = {"api_key": os.environ.get(config.API_KEY_ENV_VAR) or None}
        model_name = os.environ.get(config.MODEL_ENV_VAR)
        if model_name:
            values["model_name"] = model_name
        values.update(overrides)
        return cls(**values)


class GeminiClient:
    """Issue generation requests against the Gemini API."""

    def __init__(
        self,
        settings: Optional[GeminiSettings] = None,
        client: Optional[Any] = None
    ):
        """
        Initialize the transport client.

        A missing API key is only a warning here; the first generation
        call raises ConfigurationError instead.

        Args:
            settings: Client configuration. If not provided, read from the environment.
            client: Pre-built genai client, mainly for tests.
        """
        self.settings = settings or GeminiSettings.from_env()

        if client is None and self.settings.has_credentials:
            client = genai.Client(api_key=self.settings.api_key)
        elif client is None:
            logger.warning(
                "%s is not set; generation calls will fail until it is configured",
                config.API_KEY_ENV_VAR,
            )
        self.client = client

    def get_profile(self, profile: str) -> GenerationProfile:
        try:
            return self.settings.profiles[profile]
        except KeyError:
            raise ConfigurationError(
                f"Unknown generation profile '{profile}'. "
                f"Available: {', '.join(sorted(self.settings.profiles))}"
            ) from None

    def build_config(
        self,
        profile: str,
        response_mime_type: Optional[str] = None
    ) -> types.GenerateContentConfig:
        """Build the request config for a named profile."""
        sampling = self.get_profile(profile)
        safety_settings = [
            types.SafetySetting(category=category, threshold=config.SAFETY_THRESHOLD)
            for category in config.SAFETY_CATEGORIES
        ]
        return types.GenerateContentConfig(
            temperature=sampling.temperature,
            top_p=sampling.top_p,
            top_k=sampling.top_k,
            max_output_tokens=sampling.max_output_tokens,
            safety_settings=safety_settings,
            response_mime_type=response_mime_type,
        )

    def generate_content(
        self,
        prompt: str,
        profile: str = config.DEFAULT_PROFILE,
        response_mime_type: Optional[str] = None
    ) -> str:
        """
        Generate text for a single-turn prompt.

        Args:
            prompt: Prompt text
            profile: Generation profile key (testGeneration, candidateAnalysis, quickResponse)
            response_mime_type: Optional response MIME type, e.g. application/json

        Returns:
            Raw generated text

        Raises:
            ConfigurationError: No API key configured or unknown profile
            UpstreamError: The API returned a non-success status
            MalformedResponseError: The response carried no text
        """
        request_config = self.build_config(profile, response_mime_type)

        if self.client is None:
            raise ConfigurationError(f"{config.API_KEY_ENV_VAR} is not configured")

        logger.debug(
            "Generating content with %s (profile=%s, prompt_chars=%d)",
            self.settings.model_name, profile, len(prompt),
        )

        try:
            response = self.client.models.generate_content(
                model=self.settings.model_name,
                contents=prompt,
                config=request_config
            )
        except errors.APIError as e:
            logger.error("Gemini API error: %s", e)
            raise UpstreamError.from_status(
                e.code, e.details or e.message, api_status=e.status
            ) from e

        text = getattr(response, "text", None)
        if not isinstance(text, str) or not text.strip():
            raise MalformedResponseError("Invalid response format from Gemini API")

        return text
