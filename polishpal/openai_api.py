# openai_api.py
#
# Thin wrapper over the OpenAI chat-completions client with retry and
# exponential backoff. Works against api.openai.com or any
# OpenAI-compatible server given through base_url.
#
import time
import logging
import openai

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"


def call_openai_api(
    messages,
    api_key,
    system_message=None,
    model=None,
    base_url=None,
    max_retries=1,
    backoff_factor=2,
    max_tokens=1000,
    temperature=0.1,
    timeout=30
):
    """
    Calls the OpenAI ChatCompletion API using the client-based interface.
    Implements retry logic with exponential backoff.

    Args:
        messages (list): List of message dicts (each with "role" and "content").
        api_key (str): Your OpenAI API key.
        system_message (str): Optional system message.
        model (str): The model name to use. Defaults to "gpt-3.5-turbo" if not provided.
        base_url (str): Optional OpenAI-compatible endpoint, e.g. a local server.
        max_retries (int): Maximum retry attempts.
        backoff_factor (int): Exponential backoff factor.
        max_tokens (int): Maximum tokens in the response.
        temperature (float): Sampling temperature.
        timeout (float): Per-request timeout in seconds.

    Returns:
        The API response object.

    Raises:
        openai.OpenAIError: If all retries fail.
    """
    if model is None:
        model = DEFAULT_MODEL

    if system_message:
        messages = [{"role": "system", "content": system_message}] + messages

    client = openai.OpenAI(api_key=api_key, base_url=base_url)
    max_retries = max(1, max_retries)

    for attempt in range(1, max_retries + 1):
        try:
            logger.info(f"Attempt {attempt} to call OpenAI API ({model}).")

            completion = client.chat.completions.create(
                model=model,
                messages=messages,
                max_tokens=max_tokens,
                temperature=temperature,
                timeout=timeout
            )

            logger.info("Received response from OpenAI API.")
            return completion
        except openai.OpenAIError as e:
            logger.error(f"OpenAI API call failed on attempt {attempt}: {e}")

            if attempt == max_retries:
                logger.error("Max retries exceeded. Raising exception.")
                raise
            wait_time = backoff_factor ** attempt
            logger.info(f"Retrying in {wait_time} seconds...")
            time.sleep(wait_time)


def extract_message_content(completion):
    """Return the stripped text of the first choice, or None when absent."""
    choices = getattr(completion, "choices", None) or []
    if not choices:
        return None
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None)
    if not content:
        return None
    return content.strip()
