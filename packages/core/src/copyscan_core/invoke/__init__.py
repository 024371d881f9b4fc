from .base import Invoker, RawResponse
from .gemini import GeminiClient, build_generate_config, extract_grounding_chunks

__all__ = [
    "GeminiClient",
    "Invoker",
    "RawResponse",
    "build_generate_config",
    "extract_grounding_chunks",
]
