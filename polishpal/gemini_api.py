# gemini_api.py
#
# Gemini counterpart of openai_api.call_openai_api, built on the
# google.genai client.
#
import time
import logging

import google.genai as genai
from google.genai import types

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash-lite"


def call_gemini_api(
    messages,
    api_key,
    system_message=None,
    model=None,
    max_retries=2,
    backoff_factor=1.5,
    max_tokens=1000,
    temperature=0.1
):
    """
    Calls the Gemini API using the google.genai client.

    Args:
        messages (list): List of message dictionaries with 'content'.
        api_key (str): Your Gemini API key.
        system_message (str): Optional system instruction.
        model (str): Model name (default is "gemini-2.5-flash-lite").
        max_retries (int): Maximum number of retry attempts.
        backoff_factor (float): Backoff multiplier for retries.
        max_tokens (int): Maximum output tokens.
        temperature (float): Sampling temperature.

    Returns:
        dict: Response with 'text' key containing the generated text.

    Raises:
        ValueError: If no API key is given.
        Exception: If the API call fails after all retries.
    """
    if not model:
        model = DEFAULT_MODEL

    if not api_key:
        raise ValueError("API key must be provided or available in environment")

    client = genai.Client(api_key=api_key)

    contents = "\n".join(msg.get("content", "") for msg in messages).strip()
    config = types.GenerateContentConfig(
        system_instruction=system_message,
        temperature=temperature,
        max_output_tokens=max_tokens
    )
    max_retries = max(1, max_retries)

    for attempt in range(1, max_retries + 1):
        try:
            logger.info(f"Attempt {attempt} to call Gemini API ({model}).")

            response = client.models.generate_content(
                model=model,
                contents=contents,
                config=config
            )

            logger.info(f"Received response from Gemini API ({model}).")
            return {"text": response.text}

        except Exception as e:
            logger.error(f"Attempt {attempt} failed: {e}")
            if attempt == max_retries:
                raise
            time.sleep(backoff_factor ** attempt)
