"""
Correction providers for PolishPal.

A provider turns input text into corrected text. The analyzer never talks to
a provider directly; the Flask API, the Python API and the CLI pick one with
create_provider() and hand its output to polishpal.core.
"""

import re
import logging
from typing import Optional

import openai

from polishpal import openai_api, gemini_api

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional proofreader and editor. Correct grammar, spelling, "
    "punctuation, and improve clarity while maintaining the original meaning and tone. "
    "Return only the corrected text without explanations."
)


def build_user_prompt(text: str) -> str:
    """Wrap the user's text in the proofreading instruction."""
    return (
        "Please proofread and correct the following text. Fix grammar, spelling, punctuation, "
        "and improve clarity while maintaining the original meaning and tone."
        f"Return only the corrected text without any explanations or additional formatting: \"{text}\""
    )


class ProviderError(Exception):
    """The correction service failed or returned something unusable."""


class ProviderUnavailableError(ProviderError):
    """The correction service is not configured (e.g. missing API key)."""


class CorrectionProvider:
    """Base class: map text to a corrected version of the text."""

    name = 'base'

    def correct(self, text: str) -> str:
        raise NotImplementedError

    def is_configured(self) -> bool:
        return True


class MockCorrectionProvider(CorrectionProvider):
    """Deterministic offline corrections for a handful of common mistakes."""

    name = 'mock'

    SUBSTITUTIONS = [
        (re.compile(r'\bi\b'), 'I'),  # standalone 'i'
        (re.compile(r'\bwold\b'), 'would'),
        (re.compile(r'\bno\b(?=\s+make)'), 'not'),
        (re.compile(r'\bmistak\b'), 'mistake'),
        (re.compile(r'\bagain\s+mistake'), 'mistake again'),
        (re.compile(r'\bmake\s+same'), 'make the same'),
        (re.compile(r'\s+'), ' '),
        (re.compile(r'\s+\.'), '.'),
    ]

    def correct(self, text: str) -> str:
        corrected = text
        for pattern, replacement in self.SUBSTITUTIONS:
            corrected = pattern.sub(replacement, corrected)
        corrected = corrected.strip()

        return corrected[:1].upper() + corrected[1:]


class OpenAICorrectionProvider(CorrectionProvider):
    """Correction through an OpenAI-compatible chat-completion endpoint."""

    name = 'openai'

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None,
                 base_url: Optional[str] = None, max_retries: int = 1, timeout: float = 30):
        self.api_key = api_key
        self.model = model or openai_api.DEFAULT_MODEL
        self.base_url = base_url
        self.max_retries = max_retries
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def correct(self, text: str) -> str:
        if not self.api_key:
            raise ProviderUnavailableError("OpenAI API key not configured")

        try:
            completion = openai_api.call_openai_api(
                messages=[{"role": "user", "content": build_user_prompt(text)}],
                api_key=self.api_key,
                system_message=SYSTEM_PROMPT,
                model=self.model,
                base_url=self.base_url,
                max_retries=self.max_retries,
                max_tokens=min(1000, len(text) * 2),
                temperature=0.1,
                timeout=self.timeout
            )
        except openai.APIStatusError as e:
            raise ProviderError(f"OpenAI API error: {e.status_code} - {e.message}") from e
        except openai.OpenAIError as e:
            raise ProviderError(f"OpenAI API error: {e}") from e

        corrected = openai_api.extract_message_content(completion)
        if corrected is None:
            logger.warning("OpenAI response had no content - returning original text")
            return text
        return corrected


class GeminiCorrectionProvider(CorrectionProvider):
    """Correction through the Gemini API."""

    name = 'gemini'

    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None, max_retries: int = 2):
        self.api_key = api_key
        self.model = model or gemini_api.DEFAULT_MODEL
        self.max_retries = max_retries

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def correct(self, text: str) -> str:
        if not self.api_key:
            raise ProviderUnavailableError("Gemini API key not configured")

        try:
            response = gemini_api.call_gemini_api(
                messages=[{"content": build_user_prompt(text)}],
                api_key=self.api_key,
                system_message=SYSTEM_PROMPT,
                model=self.model,
                max_retries=self.max_retries,
                max_tokens=min(1000, len(text) * 2),
                temperature=0.1
            )
        except Exception as e:
            raise ProviderError(f"Gemini API error: {e}") from e

        corrected = (response.get('text') or '').strip()
        if not corrected:
            logger.warning("Gemini response had no content - returning original text")
            return text
        return corrected


class FallbackCorrectionProvider(CorrectionProvider):
    """Use ``primary``, falling back to ``fallback`` whenever it fails."""

    def __init__(self, primary: CorrectionProvider, fallback: Optional[CorrectionProvider] = None):
        self.primary = primary
        self.fallback = fallback or MockCorrectionProvider()
        self.name = f"{primary.name}+{self.fallback.name}"

    def is_configured(self) -> bool:
        return self.primary.is_configured() or self.fallback.is_configured()

    def correct(self, text: str) -> str:
        try:
            return self.primary.correct(text)
        except ProviderError as e:
            logger.warning(f"{self.primary.name} provider failed ({e}) - using {self.fallback.name} correction")
            return self.fallback.correct(text)


PROVIDERS = ('openai', 'gemini', 'mock')


def create_provider(name: str = 'openai', api_key: Optional[str] = None, model: Optional[str] = None,
                    base_url: Optional[str] = None, fallback_to_mock: bool = False) -> CorrectionProvider:
    """
    Factory function to create a correction provider.

    Args:
        name: 'openai', 'gemini' or 'mock'
        api_key: Credential for the remote providers
        model: Model override for the remote providers
        base_url: OpenAI-compatible endpoint (openai only)
        fallback_to_mock: Wrap remote providers so failures use the mock instead
    """
    name = (name or 'openai').lower()

    if name == 'mock':
        provider = MockCorrectionProvider()
    elif name == 'openai':
        provider = OpenAICorrectionProvider(api_key=api_key, model=model, base_url=base_url)
    elif name == 'gemini':
        provider = GeminiCorrectionProvider(api_key=api_key, model=model)
    else:
        raise ValueError(f"Unknown correction provider '{name}'. Choose from: {', '.join(PROVIDERS)}")

    if fallback_to_mock and name != 'mock':
        provider = FallbackCorrectionProvider(provider)

    logger.info(f"Correction provider initialized: {provider.name}")
    return provider
