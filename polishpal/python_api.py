"""
PolishPal Python API

A purely Python interface for PolishPal proofreading.
This API can be used directly in Python applications without needing HTTP requests.

Usage:
    from polishpal import PythonAPI

    # Uses OPENAI_API_KEY from the environment
    api = PythonAPI()

    # Or offline, with the deterministic mock corrections
    api = PythonAPI(provider="mock")

    result = api.proofread("i wold no make same again mistak .")
    print(result['corrected'])

    # Diff two texts without calling any provider
    changes = api.analyze_changes("hello world", "hello world extra")
"""

import logging
from typing import Dict, Any, List, Optional

from polishpal.core import ChangeAnalyzer, annotations_to_dicts, summarize, POSITIONAL
from polishpal.env_loader import get_env_var
from polishpal.providers import CorrectionProvider, ProviderError, create_provider


class PythonAPI:
    """
    Pure Python API for PolishPal.

    Wraps a correction provider and the change analyzer behind plain method
    calls, without a Flask server.
    """

    def __init__(self,
                 provider: str = 'openai',
                 api_key: Optional[str] = None,
                 model: Optional[str] = None,
                 base_url: Optional[str] = None,
                 alignment: str = POSITIONAL,
                 fallback_to_mock: bool = False,
                 correction_provider: Optional[CorrectionProvider] = None):
        """
        Initialize the PolishPal Python API.

        Args:
            provider: 'openai', 'gemini' or 'mock'
            api_key: Provider API key (if None, read from OPENAI_API_KEY or OPENAI_TOKEN / GEMINI_API_KEY)
            model: Model override for the provider
            base_url: OpenAI-compatible endpoint
            alignment: 'positional' (default) or 'sequence'
            fallback_to_mock: Use the mock corrections when the provider fails
            correction_provider: Ready-made provider, overrides the arguments above
        """
        self.logger = logging.getLogger(__name__)

        if correction_provider is None:
            if api_key is None and provider != 'mock':
                if provider == 'gemini':
                    api_key = get_env_var('GEMINI_API_KEY')
                else:
                    api_key = get_env_var('OPENAI_API_KEY') or get_env_var('OPENAI_TOKEN')
            correction_provider = create_provider(
                name=provider,
                api_key=api_key,
                model=model,
                base_url=base_url,
                fallback_to_mock=fallback_to_mock
            )

        self._provider = correction_provider
        self._analyzer = ChangeAnalyzer(alignment=alignment)

        self.logger.info(f"PolishPal Python API initialized - provider: {self._provider.name}, "
                         f"alignment: {alignment}")

    def proofread(self, text: str) -> Dict[str, Any]:
        """
        Correct text and analyze the changes.

        Args:
            text: The text to proofread

        Returns:
            Dictionary containing:
            - status: 'success' or 'error'
            - original: The input text
            - corrected: Corrected text (the input text on error)
            - analysis: List of word-level changes
            - statistics: Change counts per category

        Example:
            >>> api = PythonAPI(provider='mock')
            >>> api.proofread("hello wold")['corrected']
            'Hello would'
        """
        try:
            corrected = self._provider.correct(text)
        except ProviderError as e:
            self.logger.error(f"Error in proofread: {e}")
            return {
                'status': 'error',
                'message': str(e),
                'original': text,
                'corrected': text,
                'analysis': [],
                'statistics': summarize([])
            }

        analysis = self._analyzer.analyze(text, corrected)
        return {
            'status': 'success',
            'original': text,
            'corrected': corrected,
            'analysis': annotations_to_dicts(analysis),
            'statistics': summarize(analysis)
        }

    def correct_text(self, text: str) -> str:
        """
        Get corrected text only. Raises ProviderError if correction fails.
        """
        return self._provider.correct(text)

    def analyze_changes(self, original: str, corrected: str) -> List[Dict[str, Any]]:
        """Analyze changes between two texts without calling the provider."""
        return annotations_to_dicts(self._analyzer.analyze(original, corrected))

    def get_provider_status(self) -> Dict[str, Any]:
        """Report which provider is in use and whether it is configured."""
        return {
            'provider': self._provider.name,
            'configured': self._provider.is_configured(),
            'alignment': self._analyzer.alignment
        }


# Convenience function for quick usage
def proofread(text: str, **kwargs) -> Dict[str, Any]:
    """
    Quick convenience function for one-off proofreading.

    Example:
        >>> from polishpal.python_api import proofread
        >>> result = proofread("i wold no make same again mistak .", provider='mock')
        >>> print(result['corrected'])
    """
    api = PythonAPI(**kwargs)
    return api.proofread(text)


def analyze(original: str, corrected: str, alignment: str = POSITIONAL) -> List[Dict[str, Any]]:
    """Quick convenience function: diff two texts, no provider involved."""
    analyzer = ChangeAnalyzer(alignment=alignment)
    return annotations_to_dicts(analyzer.analyze(original, corrected))
