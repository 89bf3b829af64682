"""
PolishPal: AI-Powered Text Proofreading

Sends text to a correction provider (OpenAI-compatible chat completions,
Gemini, or an offline mock) and reports the word-level changes it made:
spelling, grammar, capitalization, missing and extra words.

Python API Usage:
    from polishpal import PythonAPI

    api = PythonAPI(provider="mock")
    result = api.proofread("i wold no make same again mistak .")

Or diff two texts directly:
    from polishpal import analyze_changes

    annotations = analyze_changes("hello world", "hello world extra")
"""

__version__ = "1.0.0"
__author__ = "PolishPal Team"

from .core import Annotation, ChangeAnalyzer, analyze_changes, is_likely_spelling
from .api import create_app
from .python_api import PythonAPI, proofread

__all__ = ['Annotation', 'ChangeAnalyzer', 'analyze_changes', 'is_likely_spelling',
           'create_app', 'PythonAPI', 'proofread']
